import pytest


_IBM_ENV_VARS = (
    "IBMCLOUD_API_KEY",
    "IC_API_KEY",
    "IBMCLOUD_REGION",
    "IC_REGION",
    "IBMCLOUD_VISIBILITY",
    "IBMCLOUD_IAM_API_ENDPOINT",
    "IBMCLOUD_SECRETS_MANAGER_API_ENDPOINT",
)


@pytest.fixture(autouse=True)
def clean_ibm_env(monkeypatch):
    for name in _IBM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
