# This project was developed with assistance from AI tools.
"""Loan program eligibility.

Maps employment type and buyer tags to the programs a buyer can use. ITIN
status overrides everything else; veteran status outranks first-time status
for the recommended slot.
"""

from collections.abc import Iterable

from ..schemas.enums import BuyerTag, CreditTier, EmploymentType
from ..schemas.lead import LoanEligibility, ProgramInfo

ITIN_PORTFOLIO = "ITIN Portfolio Loans (Non-QM)"
VA = "VA"
FHA = "FHA"
CONVENTIONAL = "Conventional"
BANK_STATEMENT = "Bank Statement Loans"
FHA_INVESTOR_EXCLUSION = "FHA (not allowed for investment properties)"

PMI_THRESHOLD_PCT = 20.0

PROGRAMS: list[ProgramInfo] = [
    ProgramInfo(
        name=CONVENTIONAL,
        description="Standard fixed-rate mortgage with predictable payments. Private mortgage "
        "insurance applies below 20% down.",
        min_down_payment_pct=3.0,
    ),
    ProgramInfo(
        name=FHA,
        description="Government-backed loan with lower credit score and down payment "
        "requirements. Owner-occupied homes only.",
        min_down_payment_pct=3.5,
    ),
    ProgramInfo(
        name=VA,
        description="Available to eligible veterans and service members. No down payment "
        "required and no private mortgage insurance.",
        min_down_payment_pct=0.0,
    ),
    ProgramInfo(
        name=BANK_STATEMENT,
        description="Qualifies self-employed and 1099 borrowers on 12-24 months of bank "
        "deposits instead of tax returns.",
        min_down_payment_pct=10.0,
        requires_special_documentation=True,
    ),
    ProgramInfo(
        name=ITIN_PORTFOLIO,
        description="Portfolio loans for borrowers with an ITIN instead of a Social Security "
        "number. Offered by select lenders.",
        min_down_payment_pct=10.0,
        requires_special_documentation=True,
    ),
]


def resolve_loan_eligibility(
    employment_type: EmploymentType,
    buyer_tags: Iterable[BuyerTag],
    credit_tier: CreditTier = CreditTier.UNKNOWN,
    down_payment_percent: float | None = None,
) -> LoanEligibility:
    """Resolve eligible and excluded loan programs plus one recommendation.

    ``eligible`` and ``not_eligible`` accumulate independently; the first rule
    to fill ``recommended`` wins. Credit tier does not gate any program today
    but is accepted so callers pass the full buyer picture.
    """
    tags = set(buyer_tags)
    is_veteran = BuyerTag.VETERAN in tags
    is_first_time = BuyerTag.FIRST_TIME in tags
    is_investor = BuyerTag.INVESTOR in tags

    if employment_type is EmploymentType.ITIN:
        return LoanEligibility(
            eligible=[ITIN_PORTFOLIO],
            not_eligible=[FHA, VA, CONVENTIONAL],
            recommended=ITIN_PORTFOLIO,
            requires_special_documentation=True,
            pmi_likely=False,
        )

    eligible: list[str] = []
    not_eligible: list[str] = []
    recommended: str | None = None
    requires_special_documentation = False

    if is_veteran:
        eligible.append(VA)
        recommended = VA

    if is_first_time and not is_investor:
        eligible.append(FHA)
        if recommended is None:
            recommended = FHA
    elif is_investor:
        not_eligible.append(FHA_INVESTOR_EXCLUSION)

    eligible.append(CONVENTIONAL)
    if recommended is None and not is_veteran:
        recommended = CONVENTIONAL

    if not is_veteran:
        not_eligible.append(VA)

    if employment_type.is_self_employed:
        eligible.append(BANK_STATEMENT)
        requires_special_documentation = True

    pmi_likely = (
        not is_veteran
        and down_payment_percent is not None
        and down_payment_percent < PMI_THRESHOLD_PCT
    )

    return LoanEligibility(
        eligible=eligible,
        not_eligible=not_eligible,
        recommended=recommended or CONVENTIONAL,
        requires_special_documentation=requires_special_documentation,
        pmi_likely=pmi_likely,
    )
