"""
Pet Donor Core - Application Entry Point

Initializes observability, loads the donation policy from the environment and
wires the donor status service used by the app's screens.
"""

import logging
from typing import Mapping, Optional

from config import load_policy
from observability.config import setup_observability
from services.app_state import AppStateStore, Clock
from services.badges import create_badge_formatter
from services.donor_status import DonorStatusService

logger = logging.getLogger(__name__)


class DonorApp:
    """Container for the services shared by the app shell."""
    
    def __init__(self, donor_status: DonorStatusService, app_state: AppStateStore):
        self.donor_status = donor_status
        self.app_state = app_state


def create_app(
    environ: Optional[Mapping[str, str]] = None,
    clock: Optional[Clock] = None,
    enable_observability: bool = True
) -> DonorApp:
    """
    Build the application services.
    
    Args:
        environ: Environment mapping for policy and observability, defaults to os.environ
        clock: Clock for message auto-clear, defaults to a monotonic clock
        enable_observability: Whether to install tracing and logging
        
    Returns:
        DonorApp with the donor status service and message store
        
    Raises:
        InvalidConfiguration: If the donation policy cannot be loaded
    """
    if enable_observability:
        setup_observability(environ)
    
    policy = load_policy(environ)
    donor_status = DonorStatusService(policy, create_badge_formatter())
    app_state = AppStateStore(clock)
    
    logger.info(
        "Donor app initialized",
        extra={"consent_form_version": policy.consent_form_version}
    )
    
    return DonorApp(donor_status, app_state)
