"""Soil Advisor: soil health scoring and fertilizer, pesticide and crop recommendations."""
