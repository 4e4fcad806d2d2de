"""
Recommendation Generator
========================

Improvement suggestions for every scored category that fell short of its
full weight. The YES bonus is optional and never produces a suggestion.

Version: 0.1.0
"""

from decimal import ROUND_HALF_UP, Decimal

from services.bbbee_scoring.engine.calculator import ScoreResult


def _percent(fraction: float) -> str:
    """Render a target fraction as a whole percentage, rounding halves up."""
    value = (Decimal(str(fraction)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{value}%"


def recommend(result: ScoreResult) -> list[str]:
    """Return suggestions in scorecard order."""
    scorecard = result.scorecard
    recommendations = []

    if result.ownership_score < scorecard.ownership.weight:
        recommendations.append(
            "Increase black ownership to meet the sector target of "
            f"{_percent(scorecard.ownership.target)}."
        )

    if result.management_control_score < scorecard.management_control.weight:
        recommendations.append(
            "Enhance black representation in management to meet the sector target of "
            f"{_percent(scorecard.management_control.target)}."
        )

    if result.skills_development_score < scorecard.skills_development.weight:
        recommendations.append(
            "Invest more in skills development to meet the sector target of "
            f"{_percent(scorecard.skills_development.target)} of leviable amount."
        )

    if result.esd_score < scorecard.esd.weight:
        recommendations.append(
            "Improve Enterprise and Supplier Development by engaging more with "
            "black-owned suppliers (target: "
            f"{_percent(scorecard.esd.target_supplier)} of procurement spend) and "
            "increasing contributions to enterprise development (target: "
            f"{_percent(scorecard.esd.target_enterprise)} of NPAT)."
        )

    if result.socio_economic_development_score < scorecard.socio_economic_development.weight:
        recommendations.append(
            "Contribute more to socio-economic development to meet the sector target of "
            f"{_percent(scorecard.socio_economic_development.target)} of NPAT."
        )

    return recommendations
