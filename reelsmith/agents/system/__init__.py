"""System agents - style routing"""

from .orchestrator_agent import orchestrator_agent

__all__ = ['orchestrator_agent']
