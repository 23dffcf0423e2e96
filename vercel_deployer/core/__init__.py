"""Core functionality for the Vercel deployer."""

from vercel_deployer.core.exceptions import (
    EmptyContentError,
    InvalidCredentialsError,
    InvalidParameterError,
    NodeOperationError,
    UpstreamError,
    VercelDeployerError,
)
from vercel_deployer.core.outcome import BestEffort, best_effort

__all__ = [
    "VercelDeployerError",
    "EmptyContentError",
    "InvalidCredentialsError",
    "InvalidParameterError",
    "NodeOperationError",
    "UpstreamError",
    "BestEffort",
    "best_effort",
]
