"""Field paths and layouts shared by the soilFER survey forms."""

from landcover_pipeline.countries.layout import (
    CROP,
    KIND,
    ArrayLayout,
    CropLookup,
    DetailField,
    crop_field,
    crop_field_or_other,
)

ROOT = "soilFER_collect"
SAMPLING = f"{ROOT}/soil_description_sampling"
SITE = f"{SAMPLING}/Site_identification"
GENERAL_INFO = f"{ROOT}/section0_general_Info"
EROSION = f"{SAMPLING}/erosion_status"
LANDSCAPE = f"{ROOT}/landscape_description"

SITE_ID_FIELDS = (f"{SITE}/site_id",)
PROVINCE_FIELDS = (f"{SITE}/selected_province",)
GEOPOINT_FIELDS = (f"{SITE}/geopoint",)
SURVEYOR_FIELDS = (f"{GENERAL_INFO}/surveyor_name", "username")
COMMENTS_FIELDS = (f"{SAMPLING}/barcode_scan/other_comments",)
SURVEYOR_COMMENTS_FIELDS = (f"{SAMPLING}/final_comments_site",)

LANDSCAPE_PHOTOS = f"{LANDSCAPE}/land_feature_photos"
EROSION_PHOTOS = f"{EROSION}/land_feature_photos"

# Repeat-group land-cover section (one entry per component)
LANDCOVER_REPEAT = f"{ROOT}/landcover_description"
EROSION_LANDCOVER = f"{EROSION}/landcover_description"

_CULTIVATED = "group_mz57q81/Cultivated_vegatation"
_ARTIFICIAL = "artificial_surfaces_group"

REPEAT_CROPS = CropLookup(
    category_field=f"{_CULTIVATED}/category_001",
    resolvers={
        "basic_grains": crop_field(f"{_CULTIVATED}/basic_grains"),
        "crops_shrubs": crop_field(f"{_CULTIVATED}/crops_shrubs"),
        "crops_trees": crop_field(f"{_CULTIVATED}/crops_trees"),
        "crops_annual": crop_field_or_other(
            f"{_CULTIVATED}/crops_annual", f"{_CULTIVATED}/other_crops_annual"
        ),
        "natural_pastures": crop_field(f"{_CULTIVATED}/natural_pastures"),
    },
)

# Order is user-facing: it is the order of the detail string
REPEAT_CHECKLIST = (
    DetailField("landcover", KIND),
    DetailField("veg_type", f"{_CULTIVATED}/main_vegetation_type"),
    DetailField("artificiality", "group_mz57q81/vegetation_artificiality_001"),
    DetailField("category", f"{_CULTIVATED}/category_001"),
    DetailField("crop", CROP),
    DetailField("season", f"{_CULTIVATED}/season"),
    DetailField("on_season_type", f"{_CULTIVATED}/on_season_type"),
    DetailField("off_season_type", f"{_CULTIVATED}/off_season_type"),
    DetailField("frequency", f"{_CULTIVATED}/frequency"),
    DetailField("water", f"{_CULTIVATED}/water_supply"),
    DetailField("area_type", f"{_ARTIFICIAL}/Non_vegetated_area"),
    DetailField("nonveg_off_season_type", f"{_ARTIFICIAL}/off_season_type"),
)

REPEAT_LAYOUT = ArrayLayout(
    paths=(LANDCOVER_REPEAT, EROSION_LANDCOVER),
    checklist=REPEAT_CHECKLIST,
    crop=REPEAT_CROPS,
)
