"""
Recommendation engine: converts a soil measurement and its health score into
fertilizer, pesticide and crop recommendations.

Modules
-------
fertilizer   : get_fertilizer_recommendations() — deficit dosing + fallback.
pesticide    : get_pesticide_recommendations() — ordered rule list.
crop_catalog : CropProfile table + N/P/K level thresholds (data only).
crop_matcher : score_crop() + rank_crops() — generic additive scorer.
generator    : compute_recommendations() — bundles the three lists.
reference    : fertilizer_reference() + crops_for_soil() lookups.
reporter     : write_analysis_json() + write_analysis_csv() — file output.
"""
