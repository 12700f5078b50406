# This project was developed with assistance from AI tools.
"""Bilingual message catalog for reports, tips and census insights.

One ``MessageKey`` per user-facing string, one template per locale. Templates
use ``str.format`` placeholders only; amounts are pre-formatted by the caller.
A locale missing any key fails at import time.
"""

import enum

from ..schemas.enums import LeadType, Locale


class MessageKey(str, enum.Enum):
    # Tips
    TIP_PREAPPROVAL = "tip.preapproval"
    TIP_COMPARE_RATES = "tip.compare_rates"
    TIP_CLOSING_COSTS = "tip.closing_costs"
    TIP_INSPECTION = "tip.inspection"
    TIP_EMERGENCY_FUND = "tip.emergency_fund"
    TIP_IMPROVE_CREDIT = "tip.improve_credit"
    TIP_AVOID_PMI = "tip.avoid_pmi"
    TIP_SELF_EMPLOYED_DOCS = "tip.self_employed_docs"
    TIP_ITIN_DOCS = "tip.itin_docs"
    TIP_VA_BENEFIT = "tip.va_benefit"

    # Action plan
    ACTION_REVIEW_CREDIT = "action.review_credit"
    ACTION_SAVE_DOWN_PAYMENT = "action.save_down_payment"
    ACTION_PREAPPROVAL = "action.preapproval"
    ACTION_FIND_AGENT = "action.find_agent"
    ACTION_START_SEARCH = "action.start_search"
    ACTION_ACT_QUICKLY = "action.act_quickly"
    ACTION_IMPROVE_PROFILE = "action.improve_profile"

    # Report sections
    REPORT_TITLE = "report.title"
    SECTION_FINANCIAL = "report.section.financial"
    LINE_PRICE_RANGE = "report.line.price_range"
    LINE_MAX_AFFORDABLE = "report.line.max_affordable"
    LINE_MONTHLY_PAYMENT = "report.line.monthly_payment"
    LINE_DTI = "report.line.dti"
    SECTION_PROFILE = "report.section.profile"
    LINE_BUYER_TYPE = "report.line.buyer_type"
    LINE_FIRST_TIME_ADVANTAGES = "report.line.first_time_advantages"
    LINE_CREDIT_PROFILE = "report.line.credit_profile"
    SECTION_PROGRAMS = "report.section.programs"
    LINE_RECOMMENDED_PROGRAM = "report.line.recommended_program"
    LINE_ELIGIBLE_PROGRAMS = "report.line.eligible_programs"
    LINE_SPECIAL_DOCUMENTATION = "report.line.special_documentation"
    SECTION_LOCATION = "report.section.location"
    LINE_TARGET_AREA = "report.line.target_area"
    LINE_AREA_MEDIAN_HOME = "report.line.area_median_home"
    LINE_AREA_MEDIAN_INCOME = "report.line.area_median_income"
    SECTION_TIMELINE = "report.section.timeline"
    LINE_TARGET_TIMELINE = "report.line.target_timeline"
    LINE_TIMELINE_URGENT = "report.line.timeline_urgent"
    LINE_TIMELINE_LONG = "report.line.timeline_long"
    SECTION_RECOMMENDATIONS = "report.section.recommendations"
    LINE_DOWN_PAYMENT_PMI = "report.line.down_payment_pmi"
    LINE_W2_ADVANTAGE = "report.line.w2_advantage"
    LINE_NEXT_STEP = "report.line.next_step"
    SECTION_MARKET = "report.section.market"
    LINE_MARKET_CONTEXT = "report.line.market_context"

    # Shared fragments
    TIMELINE_MONTHS = "timeline.months"
    DTI_UNDEFINED = "dti.undefined"

    # Census recommendations
    CENSUS_AFFORDABLE_MARKET = "census.affordable_market"
    CENSUS_STRONG_JOBS = "census.strong_jobs"
    CENSUS_EDUCATED = "census.educated"
    CENSUS_URBAN = "census.urban"
    CENSUS_YOUNG_POPULATION = "census.young_population"
    CENSUS_UNAVAILABLE = "census.unavailable"
    CENSUS_CONSULT_AGENTS = "census.consult_agents"
    CENSUS_CHECK_STATISTICS = "census.check_statistics"


_K = MessageKey

CATALOG: dict[Locale, dict[MessageKey, str]] = {
    Locale.EN: {
        _K.TIP_PREAPPROVAL: "Get pre-approved before house hunting",
        _K.TIP_COMPARE_RATES: "Compare rates from multiple lenders",
        _K.TIP_CLOSING_COSTS: "Factor in all closing costs",
        _K.TIP_INSPECTION: "Get a professional home inspection",
        _K.TIP_EMERGENCY_FUND: "Keep emergency funds separate",
        _K.TIP_IMPROVE_CREDIT: "Work on improving your credit score before applying",
        _K.TIP_AVOID_PMI: "Consider saving for a larger down payment to avoid PMI",
        _K.TIP_SELF_EMPLOYED_DOCS: "Prepare 2 years of tax returns and bank statements",
        _K.TIP_ITIN_DOCS: "Gather your ITIN letter and 2 years of tax returns filed with it",
        _K.TIP_VA_BENEFIT: "Request your VA Certificate of Eligibility early",
        _K.ACTION_REVIEW_CREDIT: "Review and improve credit score",
        _K.ACTION_SAVE_DOWN_PAYMENT: "Save for down payment and closing costs",
        _K.ACTION_PREAPPROVAL: "Get pre-approved with a lender",
        _K.ACTION_FIND_AGENT: "Find a qualified real estate agent",
        _K.ACTION_START_SEARCH: "Start house hunting in your price range",
        _K.ACTION_ACT_QUICKLY: "Act quickly - get pre-approved this week",
        _K.ACTION_IMPROVE_PROFILE: "Take time to improve financial profile",
        _K.REPORT_TITLE: "## 🏠 Personalized Home Buying Analysis for {name}",
        _K.SECTION_FINANCIAL: "### 💰 Financial Overview",
        _K.LINE_PRICE_RANGE: "- **Your estimated home price range**: {amount}",
        _K.LINE_MAX_AFFORDABLE: "- **Maximum affordable**: {amount}",
        _K.LINE_MONTHLY_PAYMENT: "- **Estimated monthly payment**: {amount}",
        _K.LINE_DTI: "- **Debt-to-income ratio**: {dti}",
        _K.SECTION_PROFILE: "### 👤 Buyer Profile Analysis",
        _K.LINE_BUYER_TYPE: "- **Primary buyer type**: {lead_type}",
        _K.LINE_FIRST_TIME_ADVANTAGES: (
            "- **First-time buyer advantages**: Access to special programs, lower down "
            "payment options, and potential tax benefits"
        ),
        _K.LINE_CREDIT_PROFILE: (
            "- **Credit profile**: {band} - This affects your interest rate and loan options"
        ),
        _K.SECTION_PROGRAMS: "### 🏦 Loan Programs",
        _K.LINE_RECOMMENDED_PROGRAM: "- **Recommended program**: {program}",
        _K.LINE_ELIGIBLE_PROGRAMS: "- **Eligible programs**: {programs}",
        _K.LINE_SPECIAL_DOCUMENTATION: (
            "- **Documentation**: Your profile needs alternative income documentation"
        ),
        _K.SECTION_LOCATION: "### 🏘️ Location Insights",
        _K.LINE_TARGET_AREA: "- **Target area**: {city}",
        _K.LINE_AREA_MEDIAN_HOME: "- **Area median home value**: {amount}",
        _K.LINE_AREA_MEDIAN_INCOME: "- **Area median household income**: {amount}",
        _K.SECTION_TIMELINE: "### ⏰ Timeline Strategy",
        _K.LINE_TARGET_TIMELINE: "- **Target timeline**: {timeline}",
        _K.LINE_TIMELINE_URGENT: (
            "- **Recommendation**: Get pre-approved immediately and start house hunting actively"
        ),
        _K.LINE_TIMELINE_LONG: (
            "- **Recommendation**: Use the extra time to raise your credit score and savings"
        ),
        _K.SECTION_RECOMMENDATIONS: "### 🎯 Key Recommendations",
        _K.LINE_DOWN_PAYMENT_PMI: (
            "- **Down payment strategy**: {percent}% down - Consider PMI costs and removal "
            "strategies"
        ),
        _K.LINE_W2_ADVANTAGE: (
            "- **Employment advantage**: W-2 employment typically qualifies for better rates "
            "and easier approval"
        ),
        _K.LINE_NEXT_STEP: (
            "- **Next step priority**: Secure pre-approval to strengthen your offers in "
            "competitive markets"
        ),
        _K.SECTION_MARKET: "### 📊 Market Context",
        _K.LINE_MARKET_CONTEXT: (
            "- Current market conditions suggest getting pre-approved before house hunting "
            "to act quickly on good opportunities"
        ),
        _K.TIMELINE_MONTHS: "{value} months",
        _K.DTI_UNDEFINED: "N/A",
        _K.CENSUS_AFFORDABLE_MARKET: "Affordable housing market with good investment opportunities",
        _K.CENSUS_STRONG_JOBS: "Strong job market with good employment opportunities",
        _K.CENSUS_EDUCATED: "Educated community with quality schools expected",
        _K.CENSUS_URBAN: "Urban area with comprehensive services and amenities",
        _K.CENSUS_YOUNG_POPULATION: "Young, active population ideal for families",
        _K.CENSUS_UNAVAILABLE: "Census data unavailable - consider researching the area locally",
        _K.CENSUS_CONSULT_AGENTS: "Consult with local real estate agents for market insights",
        _K.CENSUS_CHECK_STATISTICS: "Check municipal and county statistics directly",
    },
    Locale.ES: {
        _K.TIP_PREAPPROVAL: "Obtenga una pre-aprobación antes de buscar casas",
        _K.TIP_COMPARE_RATES: "Compare tasas de diferentes prestamistas",
        _K.TIP_CLOSING_COSTS: "Considere todos los costos de cierre",
        _K.TIP_INSPECTION: "Inspeccione la propiedad antes de comprar",
        _K.TIP_EMERGENCY_FUND: "Tenga fondos de emergencia separados",
        _K.TIP_IMPROVE_CREDIT: "Trabaje en mejorar su puntaje crediticio antes de aplicar",
        _K.TIP_AVOID_PMI: "Considere ahorrar para un enganche mayor y evitar el PMI",
        _K.TIP_SELF_EMPLOYED_DOCS: "Prepare 2 años de declaraciones de impuestos y estados de cuenta",
        _K.TIP_ITIN_DOCS: "Reúna su carta ITIN y 2 años de declaraciones presentadas con ella",
        _K.TIP_VA_BENEFIT: "Solicite con anticipación su Certificado de Elegibilidad VA",
        _K.ACTION_REVIEW_CREDIT: "Revisar y mejorar puntaje crediticio",
        _K.ACTION_SAVE_DOWN_PAYMENT: "Ahorrar para el pago inicial y costos de cierre",
        _K.ACTION_PREAPPROVAL: "Obtener pre-aprobación del prestamista",
        _K.ACTION_FIND_AGENT: "Encontrar un agente inmobiliario",
        _K.ACTION_START_SEARCH: "Comenzar la búsqueda de propiedades en su rango de precio",
        _K.ACTION_ACT_QUICKLY: "Actúe rápido - obtenga su pre-aprobación esta semana",
        _K.ACTION_IMPROVE_PROFILE: "Tómese el tiempo para mejorar su perfil financiero",
        _K.REPORT_TITLE: "## 🏠 Análisis Personalizado de Compra de Casa para {name}",
        _K.SECTION_FINANCIAL: "### 💰 Resumen Financiero",
        _K.LINE_PRICE_RANGE: "- **Tu rango de precio estimado**: {amount}",
        _K.LINE_MAX_AFFORDABLE: "- **Máximo asequible**: {amount}",
        _K.LINE_MONTHLY_PAYMENT: "- **Pago mensual estimado**: {amount}",
        _K.LINE_DTI: "- **Relación deuda-ingreso**: {dti}",
        _K.SECTION_PROFILE: "### 👤 Análisis de Perfil de Comprador",
        _K.LINE_BUYER_TYPE: "- **Tipo principal de comprador**: {lead_type}",
        _K.LINE_FIRST_TIME_ADVANTAGES: (
            "- **Ventajas del comprador primerizo**: Acceso a programas especiales, opciones "
            "de enganche más bajo y beneficios fiscales potenciales"
        ),
        _K.LINE_CREDIT_PROFILE: (
            "- **Perfil crediticio**: {band} - Esto afecta tu tasa de interés y opciones de "
            "préstamo"
        ),
        _K.SECTION_PROGRAMS: "### 🏦 Programas de Préstamo",
        _K.LINE_RECOMMENDED_PROGRAM: "- **Programa recomendado**: {program}",
        _K.LINE_ELIGIBLE_PROGRAMS: "- **Programas elegibles**: {programs}",
        _K.LINE_SPECIAL_DOCUMENTATION: (
            "- **Documentación**: Tu perfil requiere documentación alternativa de ingresos"
        ),
        _K.SECTION_LOCATION: "### 🏘️ Perspectivas de Ubicación",
        _K.LINE_TARGET_AREA: "- **Área objetivo**: {city}",
        _K.LINE_AREA_MEDIAN_HOME: "- **Valor mediano de vivienda del área**: {amount}",
        _K.LINE_AREA_MEDIAN_INCOME: "- **Ingreso mediano del hogar en el área**: {amount}",
        _K.SECTION_TIMELINE: "### ⏰ Estrategia de Cronograma",
        _K.LINE_TARGET_TIMELINE: "- **Cronograma objetivo**: {timeline}",
        _K.LINE_TIMELINE_URGENT: (
            "- **Recomendación**: Obtén preaprobación inmediatamente y comienza la búsqueda "
            "activa de casa"
        ),
        _K.LINE_TIMELINE_LONG: (
            "- **Recomendación**: Usa el tiempo extra para subir tu puntaje de crédito y "
            "tus ahorros"
        ),
        _K.SECTION_RECOMMENDATIONS: "### 🎯 Recomendaciones Clave",
        _K.LINE_DOWN_PAYMENT_PMI: (
            "- **Estrategia de enganche**: {percent}% de enganche - Considera costos de PMI "
            "y estrategias de eliminación"
        ),
        _K.LINE_W2_ADVANTAGE: (
            "- **Ventaja de empleo**: El empleo W-2 típicamente califica para mejores tasas "
            "y aprobación más fácil"
        ),
        _K.LINE_NEXT_STEP: (
            "- **Prioridad del siguiente paso**: Asegura la preaprobación para fortalecer tus "
            "ofertas en mercados competitivos"
        ),
        _K.SECTION_MARKET: "### 📊 Contexto del Mercado",
        _K.LINE_MARKET_CONTEXT: (
            "- Las condiciones actuales del mercado sugieren obtener preaprobación antes de "
            "buscar casa para actuar rápidamente en buenas oportunidades"
        ),
        _K.TIMELINE_MONTHS: "{value} meses",
        _K.DTI_UNDEFINED: "No disponible",
        _K.CENSUS_AFFORDABLE_MARKET: (
            "Mercado inmobiliario accesible con buenas oportunidades de inversión"
        ),
        _K.CENSUS_STRONG_JOBS: "Mercado laboral sólido con buenas oportunidades de empleo",
        _K.CENSUS_EDUCATED: "Comunidad educada con escuelas de calidad esperadas",
        _K.CENSUS_URBAN: "Área urbana con servicios y amenidades completas",
        _K.CENSUS_YOUNG_POPULATION: "Población joven y activa, ideal para familias",
        _K.CENSUS_UNAVAILABLE: (
            "Datos del censo no disponibles - considere investigar el área localmente"
        ),
        _K.CENSUS_CONSULT_AGENTS: (
            "Consulte con agentes inmobiliarios locales para obtener información del mercado"
        ),
        _K.CENSUS_CHECK_STATISTICS: "Revise las estadísticas municipales y del condado directamente",
    },
}

LEAD_TYPE_LABELS: dict[Locale, dict[LeadType, str]] = {
    Locale.EN: {
        LeadType.ITIN_FIRST_TIME: "ITIN First-Time Homebuyer",
        LeadType.ITIN_INVESTOR: "ITIN Investor",
        LeadType.ITIN_UPSIZING: "ITIN Upsizing Buyer",
        LeadType.SELF_EMPLOYED_FIRST_TIME: "Self-Employed First-Time Buyer",
        LeadType.SELF_EMPLOYED_INVESTOR: "Self-Employed Investor",
        LeadType.SELF_EMPLOYED_UPSIZING: "Self-Employed Upsizing Buyer",
        LeadType.W2_FIRST_TIME_LOW_CREDIT: "W2 First-Time Buyer (Building Credit)",
        LeadType.W2_FIRST_TIME_GOOD_CREDIT: "W2 First-Time Buyer (Strong Credit)",
        LeadType.W2_INVESTOR: "W2 Employee Investor",
        LeadType.W2_UPSIZING: "W2 Employee Upsizing",
        LeadType.MILITARY_VETERAN_FIRST_TIME: "Military/Veteran First-Time Buyer",
        LeadType.MILITARY_VETERAN_UPSIZING: "Military/Veteran Upsizing",
        LeadType.RETIRED_BUYER: "Retired Buyer",
        LeadType.HIGH_NET_WORTH: "High Net Worth Buyer",
        LeadType.MIXED_INCOME_BUYER: "Mixed Income Buyer",
        LeadType.STANDARD_BUYER: "Standard Homebuyer",
    },
    Locale.ES: {
        LeadType.ITIN_FIRST_TIME: "Comprador ITIN Primera Vez",
        LeadType.ITIN_INVESTOR: "Inversionista ITIN",
        LeadType.ITIN_UPSIZING: "Comprador ITIN Ampliando",
        LeadType.SELF_EMPLOYED_FIRST_TIME: "Comprador Auto-Empleado Primera Vez",
        LeadType.SELF_EMPLOYED_INVESTOR: "Inversionista Auto-Empleado",
        LeadType.SELF_EMPLOYED_UPSIZING: "Comprador Auto-Empleado Ampliando",
        LeadType.W2_FIRST_TIME_LOW_CREDIT: "Comprador W2 Primera Vez (Construyendo Crédito)",
        LeadType.W2_FIRST_TIME_GOOD_CREDIT: "Comprador W2 Primera Vez (Crédito Fuerte)",
        LeadType.W2_INVESTOR: "Inversionista Empleado W2",
        LeadType.W2_UPSIZING: "Empleado W2 Ampliando",
        LeadType.MILITARY_VETERAN_FIRST_TIME: "Comprador Militar/Veterano Primera Vez",
        LeadType.MILITARY_VETERAN_UPSIZING: "Militar/Veterano Ampliando",
        LeadType.RETIRED_BUYER: "Comprador Retirado",
        LeadType.HIGH_NET_WORTH: "Comprador Alto Patrimonio",
        LeadType.MIXED_INCOME_BUYER: "Comprador Ingreso Mixto",
        LeadType.STANDARD_BUYER: "Comprador de Vivienda Estándar",
    },
}


def missing_translations() -> dict[Locale, list[str]]:
    """Keys each locale is missing, for both the message and lead-type tables."""
    missing: dict[Locale, list[str]] = {}
    for locale in Locale:
        messages = CATALOG.get(locale, {})
        labels = LEAD_TYPE_LABELS.get(locale, {})
        gaps = [key.value for key in MessageKey if key not in messages]
        gaps += [lead_type.value for lead_type in LeadType if lead_type not in labels]
        if gaps:
            missing[locale] = gaps
    return missing


def render(key: MessageKey, locale: Locale = Locale.EN, **values) -> str:
    """Render one message in the requested locale."""
    template = CATALOG[locale][key]
    return template.format(**values) if values else template


def lead_type_label(lead_type: LeadType, locale: Locale = Locale.EN) -> str:
    return LEAD_TYPE_LABELS[locale][lead_type]


_missing = missing_translations()
if _missing:
    raise RuntimeError(f"Message catalog is missing translations: {_missing}")
