"""
fraudboard - Fraud model evaluation dashboard.

Fetch evaluation results, validate them, and always show something.
"""

from fraudboard.models.view import DashboardStatus, DashboardViewModel
from fraudboard.state import DashboardStateMachine

__version__ = "0.1.0"
__all__ = ["DashboardStateMachine", "DashboardStatus", "DashboardViewModel", "__version__"]
