"""Common types shared across models."""

from enum import StrEnum


class ApiSource(StrEnum):
    DIRECT_AUTH = "DirectAuth"  # bearer token straight to the backend
    APIM_AUTH = "ApimAuth"  # subscription key enforced by the gateway
