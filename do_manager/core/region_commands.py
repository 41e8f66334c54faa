"""
Region command handlers.
"""

from .command import CmdConfig
from ..display.displayer import RegionDisplay


def run_region_list(c: CmdConfig):
    """List all regions."""
    c.require_args(0, 0)
    c.display(RegionDisplay(c.regions().list()))
