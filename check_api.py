#!/usr/bin/env python3
"""Smoke check against a running college directory server."""
import os
import sys

import requests


def check_api() -> bool:
    """Register a student, then find them in the listing."""
    base_url = os.environ.get("BASE_URL", "http://localhost:3000")

    print("🎓 Checking College Directory API")
    print("=" * 50)

    # 1: registration
    print("\n1. Registering a student...")
    payload = {
        "name": "Smoke Test",
        "email": "smoke@example.com",
        "department": "Smoke Testing",
        "address": "localhost",
        "division": "Z",
    }
    try:
        response = requests.post(f"{base_url}/api/register", json=payload)
    except requests.exceptions.ConnectionError:
        print(f"❌ Cannot connect to server. Make sure it's running on {base_url}")
        return False
    if response.status_code != 201:
        print(f"❌ Registration failed: {response.status_code} - {response.text}")
        return False
    reg_no = response.json()["student"]["reg_no"]
    print(f"✅ Registered as {reg_no}")

    # 2: missing fields
    print("\n2. Registering with missing fields...")
    response = requests.post(f"{base_url}/api/register", json={"name": "Smoke Test"})
    if response.status_code == 400:
        print(f"✅ Rejected: {response.json()['error']}")
    else:
        print(f"❌ Expected 400, got {response.status_code}")
        return False

    # 3: filtered listing
    print("\n3. Listing the department...")
    response = requests.get(
        f"{base_url}/api/students", params={"department": payload["department"]}
    )
    students = response.json().get("students", [])
    if students and students[0]["reg_no"] == reg_no:
        print(f"✅ {len(students)} student(s) listed, newest is {reg_no}")
    else:
        print(f"❌ {reg_no} is not first in the listing")
        return False

    print("\n🎉 All checks passed!")
    return True


if __name__ == "__main__":
    sys.exit(0 if check_api() else 1)
