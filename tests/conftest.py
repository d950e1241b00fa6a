"""
Pytest configuration for Resume API tests.

Sets up test environment and global fixtures.
"""
import os

import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")
os.environ.setdefault("RESUME_API_BASE_URL", "http://resume-api.test")


@pytest.fixture
def sample_resume_payload():
    """JSON body the service returns for the sample resume."""
    return {
        "name": "Tony Hoare",
        "email": "",
        "experience": ["Professor of Computing at Oxford University"],
        "skills": ["Programming languages", "Algorithms", "Formal verification"],
    }
