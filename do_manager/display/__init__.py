"""
Output rendering.
"""

from .displayer import Displayer, DomainDisplay, DomainRecordDisplay, RegionDisplay

__all__ = ["Displayer", "DomainDisplay", "DomainRecordDisplay", "RegionDisplay"]
