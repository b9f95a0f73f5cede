"""Built-in sector questionnaires.

Raw question data per sector. Tags and critical flags are set on the
key questions; everything else (ids, pillars, inferred tags and
weights) is derived in ``src.catalog.questions``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CatalogEntry:
    """One raw questionnaire item before normalization."""

    category: str
    text: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    critical: bool = False
    weight: float | None = None


def _q(
    category: str,
    text: str,
    tags: list[str] | None = None,
    critical: bool = False,
    weight: float | None = None,
) -> CatalogEntry:
    return CatalogEntry(category, text, tuple(tags or ()), critical, weight)


# Public sector label -> dataset key.
SECTOR_ALIASES: dict[str, str] = {
    "Agriculture/Food": "AgricultureFood",
    "Textile/Fashion": "TextileFashion",
}

# fmt: off
DATASETS: dict[str, tuple[CatalogEntry, ...]] = {
    "Manufacturing": (
        _q("Environmental", "Do you track and report your carbon footprint?", ["metrics", "transparency", "energy"]),
        _q("Environmental", "Have you set emission reduction targets in line with global climate goals?", ["metrics", "policy", "energy"], critical=True),
        _q("Environmental", "Do you use renewable energy sources in your operations?", ["energy", "scope2"], critical=True),
        _q("Environmental", "Have you implemented an energy efficiency program?", ["energy-efficiency"]),
        _q("Environmental", "Do you track and optimize water usage in your production?", ["water", "metrics"]),
        _q("Environmental", "How do you manage waste and recycling in your operations?", ["waste", "circularity"]),
        _q("Environmental", "Do you follow circular economy principles?", ["circularity"]),
        _q("Environmental", "Do you reduce hazardous materials in production?", ["chemicals"]),
        _q("Environmental", "Have you assessed your supply chain for environmental risks?", ["procurement", "governance"]),
        _q("Environmental", "Do your suppliers meet environmental certifications?", ["procurement", "governance"]),
        _q("Social", "Do you have policies ensuring fair wages and working conditions?", ["people", "human-rights", "policy"], critical=True),
        _q("Social", "Do you ensure health & safety compliance for employees?", ["health-safety", "training"], critical=True),
        _q("Social", "Do you promote diversity and inclusion in hiring?", ["people"]),
        _q("Social", "Do you assess the social impact of your supply chain?", ["human-rights", "procurement"]),
        _q("Social", "Do you train employees on sustainability?", ["training"]),
        _q("Social", "Do you support local communities?", ["people"]),
        _q("Governance", "Do you have a code of ethics for employees and suppliers?", ["ethics", "policy"], critical=True),
        _q("Governance", "Do you have a compliance program for anti-corruption?", ["ethics", "policy"]),
        _q("Governance", "Do you integrate ESG risks into business strategy?", ["governance", "foundations"], critical=True),
        _q("Governance", "Is there an ESG responsible person in the company?", ["governance", "foundations"]),
    ),

    "AgricultureFood": (
        _q("Environmental", "Do you track greenhouse gas emissions from farming?"),
        _q("Environmental", "Do you use sustainable farming practices?"),
        _q("Environmental", "Have you implemented water conservation measures?", ["water"]),
        _q("Environmental", "Do you reduce soil degradation and deforestation?"),
        _q("Environmental", "Do you use biodegradable or recyclable packaging?", ["waste", "circularity"]),
        _q("Environmental", "Do you reduce food waste in production?", ["waste", "circularity"]),
        _q("Environmental", "Do you ensure sustainable sourcing of raw materials?", ["procurement"]),
        _q("Environmental", "Do you limit use of synthetic pesticides?", ["chemicals"]),
        _q("Environmental", "Do you measure impact on biodiversity?", ["biodiversity"]),
        _q("Environmental", "Do you participate in carbon offsetting or reforestation?"),
        _q("Social", "Do you have fair labor policies for farm workers?", ["people", "human-rights", "policy"]),
        _q("Social", "Do you provide safe working conditions?", ["health-safety", "training"]),
        _q("Social", "Do you audit human rights in the supply chain?", ["human-rights", "procurement"]),
        _q("Social", "Are smallholder farmers included in sustainability programs?", ["people"]),
        _q("Social", "Do you ensure fair wages across your supply chain?", ["people", "human-rights"]),
        _q("Social", "Do you have a policy against child and forced labor?", ["human-rights", "policy"], critical=True),
        _q("Governance", "Do you hold certifications like Fair Trade or Organic?", ["transparency", "procurement"]),
        _q("Governance", "Do you perform ESG due diligence on suppliers?", ["governance", "procurement"]),
        _q("Governance", "Do you comply with EU food safety and ESG laws?", ["governance"]),
        _q("Governance", "Do you report sustainability data to stakeholders?", ["transparency"]),
    ),

    "TextileFashion": (
        _q("Environmental", "Do you track and reduce CO₂ emissions in production?", ["metrics", "energy"]),
        _q("Environmental", "Do you use sustainable materials like organic cotton?", ["procurement", "circularity"]),
        _q("Environmental", "Do you implement water-saving techniques in dyeing?", ["water"]),
        _q("Environmental", "Do you manage chemicals responsibly in production?", ["chemicals"]),
        _q("Environmental", "Do you follow circular fashion principles?", ["circularity"]),
        _q("Environmental", "Do your suppliers meet environmental certifications?", ["procurement", "governance"]),
        _q("Environmental", "Do you track supply chain carbon emissions?", ["metrics", "procurement"]),
        _q("Environmental", "Do you have targets for reducing textile waste?", ["waste", "circularity", "metrics"]),
        _q("Social", "Do you ensure safe working conditions in factories?", ["health-safety"]),
        _q("Social", "Do you prohibit forced and child labor?", ["human-rights", "policy"], critical=True),
        _q("Social", "Do you pay fair wages to garment workers?", ["people", "human-rights"]),
        _q("Social", "Are your products ethically sourced and produced?", ["procurement", "ethics"]),
        _q("Social", "Do you improve worker well-being?", ["people"]),
        _q("Social", "Do you conduct third-party audits on labor conditions?", ["human-rights", "procurement"]),
        _q("Social", "Do you promote diversity in leadership?", ["people"]),
        _q("Governance", "Do you ensure supply chain transparency?", ["transparency", "procurement"]),
        _q("Governance", "Do you report ESG performance indicators?", ["transparency", "metrics"]),
        _q("Governance", "Do you follow a business code of ethics?", ["ethics", "policy"]),
        _q("Governance", "Do you integrate ESG risks in strategic decisions?", ["governance", "foundations"]),
        _q("Governance", "Do you educate employees and suppliers on sustainability?", ["training", "governance"]),
    ),

    "Tech": (
        _q("Environmental", "Do you track and reduce energy consumption in data centers?", ["energy", "metrics"], critical=True),
        _q("Environmental", "Do you use renewable energy for operations?", ["energy", "scope2"]),
        _q("Environmental", "Do you set targets for reducing electronic waste?", ["waste", "metrics"]),
        _q("Environmental", "Do you run take-back or recycling programs?", ["waste", "circularity"]),
        _q("Environmental", "Do you ensure responsible sourcing of materials?", ["procurement"]),
        _q("Environmental", "Do you track carbon emissions from your supply chain?", ["metrics", "procurement"]),
        _q("Environmental", "Do you design energy-efficient products?", ["energy-efficiency"]),
        _q("Environmental", "Do you ensure low water consumption in production?", ["water"]),
        _q("Social", "Do you protect labor rights in supply chains?", ["human-rights", "procurement"]),
        _q("Social", "Do you ethically source rare minerals?", ["procurement", "human-rights"]),
        _q("Social", "Do you have cybersecurity policies to protect user data?", ["policy"]),
        _q("Social", "Do you promote digital inclusion?", ["people"]),
        _q("Social", "Do you ensure safe conditions in manufacturing?", ["health-safety"]),
        _q("Social", "Do you promote gender diversity in leadership?", ["people"]),
        _q("Governance", "Do you disclose ESG and data privacy policies?", ["transparency", "policy"]),
        _q("Governance", "Do you prevent misinformation and AI bias?", ["governance"]),
        _q("Governance", "Is there board oversight on ESG topics?", ["governance", "foundations"]),
        _q("Governance", "Do you integrate ESG into product development?", ["governance"]),
        _q("Governance", "Do you follow anti-bribery policies?", ["ethics", "policy"]),
        _q("Governance", "Do you report ESG impacts to stakeholders?", ["transparency"]),
    ),

    "Finance": (
        _q("Environmental", "Do you integrate climate risk into investment decisions?", ["governance", "metrics"]),
        _q("Environmental", "Do you finance green or sustainable projects?", ["transparency"]),
        _q("Environmental", "Do you track the carbon footprint of investment portfolios?", ["metrics", "transparency"]),
        _q("Environmental", "Have you set decarbonization targets for financed emissions?", ["metrics", "policy"]),
        _q("Environmental", "Do you offer green financial products?", ["transparency"]),
        _q("Environmental", "Do you disclose ESG risks related to climate impact?", ["transparency", "governance"]),
        _q("Social", "Do you have equal employment policies?", ["people", "policy"]),
        _q("Social", "Do you include diversity in company policies?", ["people", "policy"]),
        _q("Social", "Do you support financial inclusion programs?", ["people"]),
        _q("Social", "Do you ensure fair lending practices?", ["people"]),
        _q("Social", "Do you conduct human rights due diligence for financed companies?", ["human-rights"]),
        _q("Social", "Do you assess social impact in investments?", ["metrics"]),
        _q("Social", "Do you have fair compensation policies?", ["people"]),
        _q("Governance", "Do you have an ESG risk management framework?", ["governance"]),
        _q("Governance", "Do you disclose ESG investment performance?", ["transparency"]),
        _q("Governance", "Do you integrate ESG in corporate governance?", ["governance"]),
        _q("Governance", "Do you enforce anti-corruption policies in finance operations?", ["ethics", "policy"]),
        _q("Governance", "Do you conduct third-party ESG assessments?", ["governance"]),
        _q("Governance", "Do you align investment strategy with EU taxonomy?", ["governance", "policy"]),
        _q("Governance", "Do you have an ESG officer?", ["governance", "foundations"]),
    ),

    "Construction": (
        _q("Environmental", "Do you track carbon emissions from construction activities?", ["metrics", "energy"]),
        _q("Environmental", "Do you use low-carbon or recycled materials?", ["circularity", "procurement"]),
        _q("Environmental", "Have you implemented energy-saving strategies on-site?", ["energy-efficiency"]),
        _q("Environmental", "Do you have a water conservation program in construction?", ["water"]),
        _q("Environmental", "Do you recycle construction debris and manage waste?", ["waste", "circularity"]),
        _q("Environmental", "Do you follow green building certifications (LEED, BREEAM)?", ["transparency"]),
        _q("Environmental", "Do you use renewable energy in operations?", ["energy", "scope2"]),
        _q("Environmental", "Do you protect biodiversity during construction?", ["biodiversity"]),
        _q("Environmental", "Have you assessed climate resilience in your projects?", ["governance"]),
        _q("Environmental", "Do you apply circular economy in building design?", ["circularity"]),
        _q("Social", "Do you enforce strict safety and health rules for workers?", ["health-safety", "training"], critical=True),
        _q("Social", "Do you ensure fair wages for employees and subcontractors?", ["people"]),
        _q("Social", "Do you engage local communities during construction?", ["people"]),
        _q("Social", "Do you promote diversity in the workforce?", ["people"]),
        _q("Social", "Do you offer training on sustainable building practices?", ["training"]),
        _q("Governance", "Do you have an anti-corruption policy in procurement?", ["ethics", "policy"]),
        _q("Governance", "Do you monitor ESG compliance of suppliers and subcontractors?", ["governance", "procurement"]),
        _q("Governance", "Do you perform third-party ESG audits?", ["governance"]),
        _q("Governance", "Do you disclose ESG performance in reports?", ["transparency"]),
        _q("Governance", "Is there a dedicated ESG officer?", ["governance", "foundations"]),
    ),

    "Furniture": (
        _q("Environmental", "Do you use FSC/PEFC certified sustainable wood?", ["procurement", "transparency"]),
        _q("Environmental", "Do you have a policy to reduce deforestation risks?", ["policy", "procurement"]),
        _q("Environmental", "Do you use recycled materials in production?", ["circularity"]),
        _q("Environmental", "Do you track and reduce carbon emissions from production and logistics?", ["metrics", "logistics"]),
        _q("Environmental", "Do you follow eco-friendly finishing and chemical safety?", ["chemicals"]),
        _q("Environmental", "Do you have a take-back/recycling program for furniture?", ["circularity", "waste"]),
        _q("Environmental", "Have you assessed water usage and pollution in manufacturing?", ["water"]),
        _q("Environmental", "Do you follow circular economy strategies?", ["circularity"]),
        _q("Social", "Do you ensure fair labor conditions in your factories?", ["human-rights", "people"]),
        _q("Social", "Do your suppliers follow ethical sourcing standards?", ["procurement", "human-rights"]),
        _q("Social", "Do you perform safety audits for workers?", ["health-safety"]),
        _q("Social", "Do you offer training and development programs?", ["training"]),
        _q("Social", "Do you work with local communities on sustainable wood sourcing?", ["people"]),
        _q("Social", "Do you promote gender diversity in leadership?", ["people"]),
        _q("Governance", "Do you disclose supply chain transparency in ESG reports?", ["transparency", "procurement"]),
        _q("Governance", "Do you have an ESG risk management strategy?", ["governance"]),
        _q("Governance", "Do you audit suppliers on ESG due diligence?", ["governance", "procurement"]),
        _q("Governance", "Do you ensure responsible marketing (avoid greenwashing)?", ["ethics", "transparency"]),
        _q("Governance", "Do you integrate ESG into business strategy?", ["governance"]),
        _q("Governance", "Do you report ESG results to stakeholders?", ["transparency"]),
    ),

    "Transportation": (
        _q("Environmental", "Do you track and reduce CO₂ emissions from logistics and transport?", ["metrics", "logistics"], critical=True),
        _q("Environmental", "Do you use electric or low-emission vehicles in your fleet?", ["logistics"]),
        _q("Environmental", "Have you optimized delivery routes to save fuel?", ["logistics", "energy-efficiency"]),
        _q("Environmental", "Do you use alternative fuels (biofuels, hydrogen)?"),
        _q("Environmental", "Do you reduce air pollution from logistics operations?", ["logistics"]),
        _q("Environmental", "Do you run carbon offset programs?"),
        _q("Environmental", "Do you offer eco-driving training for drivers?", ["training", "logistics"]),
        _q("Environmental", "Do you manage waste in transport hubs responsibly?", ["waste"]),
        _q("Social", "Do you ensure safe and fair working conditions for drivers?", ["people", "health-safety"]),
        _q("Social", "Do you have fatigue management systems for long-distance drivers?", ["health-safety"]),
        _q("Social", "Do you have inclusion and diversity policies?", ["people", "policy"]),
        _q("Social", "Do you train employees on ESG topics?", ["training"]),
        _q("Social", "Do you monitor subcontractor labor practices?", ["human-rights", "procurement"]),
        _q("Social", "Do you engage local communities impacted by transport?", ["people"]),
        _q("Governance", "Do you have ESG screening for suppliers?", ["governance", "procurement"]),
        _q("Governance", "Do you track and report ESG KPIs?", ["metrics", "transparency"]),
        _q("Governance", "Do you comply with EU emissions regulations?", ["governance", "policy"]),
        _q("Governance", "Do you integrate ESG into transport planning?", ["governance"]),
        _q("Governance", "Do you have anti-bribery rules in procurement?", ["ethics", "policy"]),
        _q("Governance", "Do you disclose fuel efficiency and emissions data?", ["transparency"]),
    ),
}
# fmt: on
