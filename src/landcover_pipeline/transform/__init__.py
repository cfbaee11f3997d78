"""Survey submission normalization: parsing, extraction, land-cover assembly.

Entry point is `landcover_pipeline.transform.transformer.SurveyTransformer`; obtain one
per country from `landcover_pipeline.countries.registry.CountryRegistry`.
"""
