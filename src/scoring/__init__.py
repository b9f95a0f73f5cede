"""ESG scoring engine.

Turns sector questionnaire answers into weighted Environmental, Social
and Governance pillar scores, applies critical-answer caps, and rates
the sector-weighted overall score from AAA to CCC.

Deterministic -- no I/O.
"""
