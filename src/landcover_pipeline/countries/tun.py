"""Tunisia form: flat land cover with kind-specific groups.

All vegetation cover percentages live in ``cultivated_arable_land_group`` whether the
vegetation is natural or cultivated. Non-vegetated and water groups have no cover fields.
"""

from landcover_pipeline.countries.common import (
    COMMENTS_FIELDS,
    EROSION,
    EROSION_LANDCOVER,
    EROSION_PHOTOS,
    GEOPOINT_FIELDS,
    GENERAL_INFO,
    PROVINCE_FIELDS,
    SITE_ID_FIELDS,
    SURVEYOR_COMMENTS_FIELDS,
    SURVEYOR_FIELDS,
)
from landcover_pipeline.countries.layout import (
    CROP,
    KIND,
    CountryProfile,
    CoverRange,
    CropLookup,
    DetailField,
    ExtraVegetation,
    FlatLayout,
    KindLayout,
    PhotoLayout,
    SitePrefixPsu,
    TypedCover,
    crop_field,
)

_VEG_GROUP = "cultivated_arable_land_group"

# Vegetation type answer -> field suffix ("schrubs" is a form typo kept for old submissions)
_TYPE_SUFFIXES = {
    "herbaceous": "herb",
    "shrubs": "shrub",
    "schrubs": "shrub",
    "trees": "tree",
}


def _typed_cover(type_field: str, minimum: str, maximum: str) -> TypedCover:
    """Cover pair per vegetation type from `{minimum}{suffix}` / `{maximum}{suffix}` fields."""
    return TypedCover(
        type_field=type_field,
        ranges={
            veg_type: CoverRange(minimum=f"{minimum}{suffix}", maximum=f"{maximum}{suffix}")
            for veg_type, suffix in _TYPE_SUFFIXES.items()
        },
    )


_CROP_CATEGORIES = (
    "oilseed_crops",
    "basic_grains",
    "leguminous_crops",
    "fodder_crops",
    "industrial_crops",
    "vegetable_crops",
    "fruit_crops",
    "fruit_nuts",
    "other",
)

_VEGETATED = KindLayout(
    group=_VEG_GROUP,
    checklist=(
        DetailField("landcover", KIND),
        DetailField("veg_type", "main_vegetation_type"),
        DetailField("artificiality", "vegetation_artificiality"),
        DetailField("category", "category"),
        DetailField("crop", CROP),
        DetailField("season", "season"),
        DetailField("on_season_type", "on_season_type"),
        DetailField("off_season_type", "off_season_type"),
        DetailField("frequency", "frequency"),
        DetailField("plant_min_height", "plant_minimum_height"),
        DetailField("plant_max_height", "plant_maximum_height"),
        DetailField("water", "water_supply"),
    ),
    cover=_typed_cover(
        "main_vegetation_type",
        minimum="Minimum_percentage_cover_",
        maximum="Maximum_percentage_cover_",
    ),
    crop=CropLookup(
        category_field="category",
        resolvers={category: crop_field(category) for category in _CROP_CATEGORIES},
    ),
)

_NON_VEGETATED = KindLayout(
    group="artificial_surfaces_group",
    checklist=(
        DetailField("landcover", KIND),
        DetailField("area_type", "Non_vegetated_area"),
        DetailField("natural_surface", "Natural_surface"),
        DetailField("artificial_surface", "artificial_surfaces"),
        DetailField("off_season", "off_season_type"),
    ),
)

_WATER = KindLayout(
    group="water_group",
    checklist=(
        DetailField("landcover", KIND),
        DetailField("water_type", "water_type"),
    ),
)

_EXTRA_GROUP = f"dominant_landcover/{_VEG_GROUP}"

TUN = CountryProfile(
    code="TUN",
    name="Tunisia",
    site_id_fields=SITE_ID_FIELDS,
    psu=SitePrefixPsu(),
    province_fields=PROVINCE_FIELDS,
    surveyor_fields=(f"{GENERAL_INFO}/_3_Surveyor_s_Full_Name", *SURVEYOR_FIELDS),
    geopoint_fields=GEOPOINT_FIELDS,
    landform_fields=(f"{EROSION}/landscape_description/landform_classification",),
    comments_fields=COMMENTS_FIELDS,
    surveyor_comments_fields=SURVEYOR_COMMENTS_FIELDS,
    flat=FlatLayout(
        base=EROSION_LANDCOVER,
        kinds={
            "vegetated": _VEGETATED,
            "non-vegetated": _NON_VEGETATED,
            "water": _WATER,
        },
        extras=(
            ExtraVegetation(
                label="secondary",
                flag_field="any_secondary_veg",
                type_field="secondary_vegetation_type",
                type_default="Secondary",
                cover=_typed_cover(
                    "secondary_vegetation_type",
                    minimum="min_perc_cover_secondary_",
                    maximum="max_perc_cover_secondary_",
                ),
                group=_EXTRA_GROUP,
            ),
            ExtraVegetation(
                label="third",
                flag_field="any_third_veg",
                type_field="third_vegetation_type",
                type_default="Third",
                cover=_typed_cover(
                    "third_vegetation_type",
                    minimum="min_perc_cover_third_",
                    maximum="max_perc_cover_third_",
                ),
                group=_EXTRA_GROUP,
            ),
        ),
    ),
    photos=PhotoLayout(groups=(EROSION_PHOTOS,)),
)
