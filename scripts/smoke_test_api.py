"""
Smoke test for the profile API endpoints.
Run this while the server is running in a separate terminal.
"""
import logging
import os
import sys

import requests

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

BASE_URL = os.environ.get("PROFILE_API_URL", "http://localhost:8000")
PROFILE_URL = f"{BASE_URL}/api/profile"

ENDPOINTS = [
    ("Health", f"{BASE_URL}/api/health"),
    ("Caste population", f"{PROFILE_URL}/demographics/caste-population/summary"),
    ("Age-wise population", f"{PROFILE_URL}/demographics/age-wise-population/summary"),
    ("Household heads", f"{PROFILE_URL}/demographics/househead-gender/summary"),
    ("Religion population", f"{PROFILE_URL}/demographics/religion-population/summary"),
    ("Main occupation", f"{PROFILE_URL}/demographics/main-occupation/summary"),
    ("Birth certificates", f"{PROFILE_URL}/demographics/birth-certificate-population/summary"),
    ("Deceased population", f"{PROFILE_URL}/demographics/deceased-population/summary"),
    ("Disability by age", f"{PROFILE_URL}/demographics/disability-by-age/summary"),
    ("Economically active", f"{PROFILE_URL}/demographics/economically-active-population/summary"),
    ("Mother tongue", f"{PROFILE_URL}/demographics/mother-tongue-population/summary"),
    ("Birthplace households", f"{PROFILE_URL}/demographics/birthplace-households/summary"),
    ("Demographic summary", f"{PROFILE_URL}/demographics/summary"),
    ("Ward demographics", f"{PROFILE_URL}/demographics/ward-demographics"),
    ("Ward table", f"{PROFILE_URL}/demographics/ward-demographics/table"),
    ("Agriculture firms", f"{PROFILE_URL}/economics/agriculture-firm-count/summary"),
    ("Foreign employment", f"{PROFILE_URL}/economics/foreign-employment-countries/summary"),
    ("Veterinary representatives", f"{PROFILE_URL}/economics/veterinary-representatives/summary"),
    ("Agriculture representatives", f"{PROFILE_URL}/economics/agriculture-representatives/summary"),
    ("Formal education", f"{PROFILE_URL}/education/formal-education/summary"),
    ("Delivery place", f"{PROFILE_URL}/fertility/delivery-place/summary"),
    ("Slope", f"{PROFILE_URL}/municipality-introduction/slope"),
    ("Aspect", f"{PROFILE_URL}/municipality-introduction/aspect"),
    ("Settlements", f"{PROFILE_URL}/municipality-introduction/settlements"),
    ("Facilities", f"{PROFILE_URL}/physical/facilities/summary"),
]


def check_endpoint(name, url, params=None) -> bool:
    """Request an endpoint and log a one-line result."""
    try:
        r = requests.get(url, params=params, timeout=10)
    except requests.RequestException as e:
        logger.error(f"{name}: request failed ({e})")
        return False

    if r.status_code != 200:
        logger.error(f"{name}: HTTP {r.status_code} {r.text[:200]}")
        return False

    data = r.json()
    if isinstance(data, dict):
        logger.info(f"{name}: OK, keys {list(data.keys())[:6]}")
    elif isinstance(data, list):
        logger.info(f"{name}: OK, {len(data)} items")
    else:
        logger.info(f"{name}: OK, {data}")
    return True


def main():
    logger.info(f"Smoke testing {BASE_URL}")
    results = [check_endpoint(name, url) for name, url in ENDPOINTS]
    passed = sum(results)
    logger.info(f"{passed}/{len(results)} endpoints responded")
    if passed != len(results):
        sys.exit(1)


if __name__ == "__main__":
    main()
