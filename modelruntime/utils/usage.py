"""Token usage estimation utilities."""

import math

from modelruntime.types import ModelUsage


# Vendors that only report a total are split with this input/output ratio.
INPUT_TOKEN_RATIO = 0.7
OUTPUT_TOKEN_RATIO = 0.3


def estimate_usage(total_tokens: int) -> ModelUsage:
    """Split a vendor-reported total into estimated input and output tokens.
    
    The split is an estimate; input and output may not add up to the total.
    
    Args:
        total_tokens: Total token count reported by the vendor
        
    Returns:
        Estimated usage breakdown
    """
    total = max(0, int(total_tokens or 0))
    return ModelUsage(
        input_text_tokens=math.floor(total * INPUT_TOKEN_RATIO),
        output_text_tokens=math.floor(total * OUTPUT_TOKEN_RATIO),
        total_tokens=total,
    )
