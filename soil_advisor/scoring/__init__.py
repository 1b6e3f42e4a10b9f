"""
Soil health scoring.

Modules
-------
ranges     : NutrientRange + NUTRIENT_RANGES (per soil type) + band tables
             for pH, organic carbon and zinc.
calculator : ScoreComponents dataclass + compute_score_components()
             + compute_health_score() — pure functions, no I/O.
"""
