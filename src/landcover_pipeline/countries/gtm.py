"""Guatemala form: repeat-group land cover, with a flat variant on early revisions."""

from dataclasses import replace

from landcover_pipeline.countries.common import (
    COMMENTS_FIELDS,
    EROSION,
    EROSION_LANDCOVER,
    EROSION_PHOTOS,
    GEOPOINT_FIELDS,
    LANDSCAPE,
    LANDSCAPE_PHOTOS,
    PROVINCE_FIELDS,
    REPEAT_LAYOUT,
    ROOT,
    SAMPLING,
    SITE_ID_FIELDS,
    SURVEYOR_FIELDS,
)
from landcover_pipeline.countries.layout import (
    KIND,
    CountryProfile,
    CoverRange,
    DetailField,
    ExtraVegetation,
    FlatLayout,
    KindLayout,
    PhotoLayout,
    SitePrefixPsu,
)

_SITE_GROUP = f"{ROOT}/group_we8pb85"

# Early revisions only asked for basic grains in the flat dominant group; the answer is
# reported whatever the category
_FLAT_DOMINANT = KindLayout(
    checklist=(
        DetailField("landcover", KIND),
        DetailField("veg_type", "main_vegetation_type"),
        DetailField("artificiality", "vegetation_artificiality_001"),
        DetailField("category", "Cultivated_vegatation/category_001"),
        DetailField("crop", "Cultivated_vegatation/basic_grains"),
        DetailField("season", "Cultivated_vegatation/season"),
        DetailField("frequency", "Cultivated_vegatation/frequency"),
        DetailField("water", "Cultivated_vegatation/water_supply"),
    ),
    cover=CoverRange(
        minimum="Minimum_percentage_cover_eleme",
        maximum="Maximum_percentage_cover_eleme",
    ),
)

GTM = CountryProfile(
    code="GTM",
    name="Guatemala",
    site_id_fields=SITE_ID_FIELDS,
    psu=SitePrefixPsu(),
    province_fields=PROVINCE_FIELDS,
    surveyor_fields=SURVEYOR_FIELDS,
    geopoint_fields=GEOPOINT_FIELDS,
    landform_fields=(
        f"{LANDSCAPE}/landform_classification",
        f"{EROSION}/landscape_description/landform_classification",
    ),
    comments_fields=COMMENTS_FIELDS,
    surveyor_comments_fields=(
        f"{SAMPLING}/final_comments_site",
        f"{_SITE_GROUP}/final_comments_site",
    ),
    array=replace(REPEAT_LAYOUT, site_level1_fields=(f"{_SITE_GROUP}/land_cover_types",)),
    flat=FlatLayout(
        base=EROSION_LANDCOVER,
        fallback=_FLAT_DOMINANT,
        extras=(
            ExtraVegetation(
                label="secondary",
                flag_field="any_secondary_veg",
                type_field="secondary_vegetation_type",
                type_default="Secondary",
                cover=CoverRange(
                    minimum="min_perc_cover_secondary_veg",
                    maximum="max_perc_cover_secondary_veg",
                ),
            ),
        ),
    ),
    photos=PhotoLayout(groups=(LANDSCAPE_PHOTOS, EROSION_PHOTOS)),
)
