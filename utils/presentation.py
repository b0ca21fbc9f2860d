"""
Response shaping for the roast endpoint: the pro gate and the precomputed
advisory sections that only pro callers see.
"""

from typing import Optional

from models import AdvisorySection, RoastResponse, RoastResult

PRO_ADVICE = [
    AdvisorySection(
        title="Headline rewrite checklist",
        items=[
            "Name the customer and the outcome in the first six words",
            "Replace adjectives with a number or a concrete result",
            "Keep the subheadline to one sentence that explains how",
        ],
    ),
    AdvisorySection(
        title="Conversion blockers to fix first",
        items=[
            "One primary CTA above the fold, repeated after each proof block",
            "Show pricing or a pricing link before the second scroll",
            "Put a testimonial or logo strip directly under the hero",
        ],
    ),
    AdvisorySection(
        title="Launch checklist",
        items=[
            "Load the page on a phone and read the hero without zooming",
            "Ask a stranger what the product does after five seconds",
            "Track CTA clicks before you change any copy",
        ],
    ),
]


def is_pro(flag: Optional[str]) -> bool:
    """Pro mode is on only for the literal string 'true' (any case)."""
    return (flag or "").strip().lower() == "true"


def build_roast_response(result: RoastResult, pro: bool, preview_limit: int = 2) -> RoastResponse:
    """
    Turn a parsed roast into the structured response body.

    Non-pro callers get the first `preview_limit` improvements; pro callers
    get every improvement plus the advisory sections. Unstructured results
    carry the raw completion so it can be shown verbatim.
    """
    improvements = list(result.improvements)
    if not pro:
        improvements = improvements[:max(preview_limit, 0)]

    return RoastResponse(
        score=result.score,
        good=list(result.good),
        confusing=list(result.confusing),
        improvements=improvements,
        raw=None if result.is_structured else result.raw,
        advice=[section.model_copy(deep=True) for section in PRO_ADVICE] if pro else None,
    )
