"""Pytest fixtures for landcover-pipeline tests."""

from datetime import datetime, timezone

import pytest

SITE = "soilFER_collect/soil_description_sampling/Site_identification"
REPEAT = "soilFER_collect/landcover_description"
DOM = f"{REPEAT}/dominant_landcover"
CULT = f"{DOM}/group_mz57q81/Cultivated_vegatation"
EROSION = "soilFER_collect/soil_description_sampling/erosion_status"
FLAT = f"{EROSION}/landcover_description"
LANDSCAPE_PHOTOS = "soilFER_collect/landscape_description/land_feature_photos"
EROSION_PHOTOS = f"{EROSION}/land_feature_photos"
TUN_VEG = f"{FLAT}/dominant_landcover/cultivated_arable_land_group"

FIXED_NOW = datetime(2026, 3, 1, 12, 30, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock returning a constant instant."""
    return lambda: FIXED_NOW


@pytest.fixture
def gtm_array_submission() -> dict:
    """GTM submission with a two-entry land-cover repeat group."""
    return {
        "meta/instanceID": "uuid:abc-123",
        "_uuid": "abc-123",
        "_submission_time": "2025-03-01T10:00:00",
        f"{SITE}/site_id": "GT0101-03",
        f"{SITE}/selected_province": "Alta Verapaz",
        f"{SITE}/geopoint": "15.47 -90.37 1320.5 5.0",
        "soilFER_collect/section0_general_Info/surveyor_name": "Ana Lopez",
        "today": "2025-02-28",
        "soilFER_collect/landscape_description/landform_classification": "hill",
        REPEAT: [
            {
                f"{DOM}/landcover": "vegetated",
                f"{DOM}/Maximum": "60",
                f"{CULT}/main_vegetation_type": "herbaceous",
                f"{DOM}/group_mz57q81/vegetation_artificiality_001": "cultivated",
                f"{CULT}/category_001": "crops_annual",
                f"{CULT}/crops_annual": "other",
                f"{CULT}/other_crops_annual": "amaranth",
                f"{CULT}/season": "rainy",
                f"{CULT}/water_supply": "rainfed",
            },
            {
                f"{DOM}/landcover": "non-vegetated",
                f"{DOM}/Maximum": "45",
                f"{DOM}/artificial_surfaces_group/Non_vegetated_area": "bare_soil",
                f"{DOM}/land_cover_types": "cropland",
            },
        ],
        f"{LANDSCAPE_PHOTOS}/photo_north": "IMG_0001.png",
        f"{LANDSCAPE_PHOTOS}/photo_east": "IMG_0002.jpg",
        "_attachments": [
            {
                "question_xpath": f"{LANDSCAPE_PHOTOS}/photo_north",
                "download_url": "https://kc.kobotoolbox.org/api/v2/assets/a1/data/9/attachments/11/?format=json",
            },
            {
                "question_xpath": f"{LANDSCAPE_PHOTOS}/photo_south",
                "download_url": "https://kc.kobotoolbox.org/api/v2/assets/a1/data/9/attachments/13/",
            },
        ],
        "soilFER_collect/soil_description_sampling/barcode_scan/other_comments": "bag 4",
        "soilFER_collect/group_we8pb85/final_comments_site": "steep slope",
    }


@pytest.fixture
def gtm_flat_submission() -> dict:
    """GTM submission from an early revision with the flat land-cover group."""
    return {
        "_uuid": "flat-1",
        f"{SITE}/site_id": "GT0202_01",
        "_geolocation": [15.1, -90.2],
        "start": "2024-11-05T08:12:00.000-06:00",
        "username": "field_team_2",
        f"{EROSION}/landscape_description/landform_classification": "plain",
        f"{FLAT}/land_cover_types": "grassland",
        f"{FLAT}/dominant_landcover/landcover": "vegetated",
        f"{FLAT}/dominant_landcover/main_vegetation_type": "herbaceous",
        f"{FLAT}/dominant_landcover/Minimum_percentage_cover_eleme": "25_50",
        f"{FLAT}/dominant_landcover/Maximum_percentage_cover_eleme": "50_75",
        f"{FLAT}/dominant_landcover/Cultivated_vegatation/category_001": "basic_grains",
        f"{FLAT}/dominant_landcover/Cultivated_vegatation/basic_grains": "maize",
        f"{FLAT}/any_secondary_veg": "yes",
        f"{FLAT}/secondary_vegetation_type": "shrubs",
        f"{FLAT}/min_perc_cover_secondary_veg": "10_25",
        f"{EROSION_PHOTOS}/photo_west": "w.jpg",
        "_attachments": [
            {
                "question_xpath": f"{EROSION_PHOTOS}/photo_west",
                "download_url": "https://kc.example.org/attachments/77/?FORMAT=JSON",
            },
        ],
    }


@pytest.fixture
def hnd_submission() -> dict:
    """HND submission with a single repeat-group entry and a dedicated PSU answer."""
    return {
        "meta/instanceID": "uuid:hnd-9",
        f"{SITE}/site_id": "0457-2",
        f"{SITE}/psu": "0457",
        f"{SITE}/geopoint": "14.08 -87.20",
        "soilFER_collect/landscape_description/landform_classification_GTM": "valley",
        REPEAT: [
            {
                f"{DOM}/landcover": "vegetated",
                f"{DOM}/Maximum": 80,
                f"{CULT}/category_001": "crops_trees",
                f"{CULT}/crops_trees": "coffee",
                f"{DOM}/land_cover_types": "perennial_crops",
            },
        ],
    }


@pytest.fixture
def tun_vegetated_submission() -> dict:
    """TUN flat submission: vegetated dominant cover with secondary and third vegetation."""
    return {
        "_uuid": "tun-1",
        f"{SITE}/site_id": "TN12-004",
        "soilFER_collect/section0_general_Info/_3_Surveyor_s_Full_Name": "Sami B.",
        "soilFER_collect/section0_general_Info/surveyor_name": "sami",
        f"{FLAT}/land_cover_types": "cropland",
        f"{FLAT}/dominant_landcover/landcover": "vegetated",
        f"{TUN_VEG}/main_vegetation_type": "trees",
        f"{TUN_VEG}/Minimum_percentage_cover_tree": "25_50",
        f"{TUN_VEG}/Maximum_percentage_cover_tree": "50_75",
        f"{TUN_VEG}/Maximum_percentage_cover_herb": "90",
        f"{TUN_VEG}/category": "fruit_crops",
        f"{TUN_VEG}/fruit_crops": "olive",
        f"{TUN_VEG}/plant_minimum_height": "2",
        f"{TUN_VEG}/water_supply": "irrigated",
        f"{TUN_VEG}/any_secondary_veg": "yes",
        f"{TUN_VEG}/secondary_vegetation_type": "schrubs",
        f"{TUN_VEG}/min_perc_cover_secondary_shrub": "10_25",
        f"{TUN_VEG}/any_third_veg": "yes",
        f"{TUN_VEG}/third_vegetation_type": "herbaceous",
        f"{TUN_VEG}/max_perc_cover_third_herb": "5",
        f"{EROSION_PHOTOS}/photo_north": "n.jpg",
    }


@pytest.fixture
def tun_water_submission() -> dict:
    """TUN flat submission whose dominant cover is water."""
    return {
        "_uuid": "tun-2",
        f"{SITE}/site_id": "TN12-005",
        f"{FLAT}/land_cover_types": "water_body",
        f"{FLAT}/dominant_landcover/landcover": "water",
        f"{FLAT}/dominant_landcover/water_group/water_type": "reservoir",
        f"{TUN_VEG}/main_vegetation_type": "trees",
        f"{TUN_VEG}/Maximum_percentage_cover_tree": "75",
    }
