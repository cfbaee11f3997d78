"""Honduras form: repeat-group land cover only."""

from landcover_pipeline.countries.common import (
    COMMENTS_FIELDS,
    GEOPOINT_FIELDS,
    LANDSCAPE,
    LANDSCAPE_PHOTOS,
    PROVINCE_FIELDS,
    REPEAT_LAYOUT,
    SITE,
    SITE_ID_FIELDS,
    SURVEYOR_COMMENTS_FIELDS,
    SURVEYOR_FIELDS,
)
from landcover_pipeline.countries.layout import CountryProfile, FieldPsu, PhotoLayout

HND = CountryProfile(
    code="HND",
    name="Honduras",
    site_id_fields=SITE_ID_FIELDS,
    psu=FieldPsu(field=f"{SITE}/psu"),
    province_fields=PROVINCE_FIELDS,
    surveyor_fields=SURVEYOR_FIELDS,
    geopoint_fields=GEOPOINT_FIELDS,
    landform_fields=(
        f"{LANDSCAPE}/landform_classification",
        f"{LANDSCAPE}/landform_classification_GTM",
    ),
    comments_fields=COMMENTS_FIELDS,
    surveyor_comments_fields=SURVEYOR_COMMENTS_FIELDS,
    array=REPEAT_LAYOUT,
    photos=PhotoLayout(groups=(LANDSCAPE_PHOTOS,)),
)
