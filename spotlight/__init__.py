# Spotlight Web Package
"""
Launcher-style web search box core.

Components:
  - Engine registry: bang prefixes ("g", "y", "gh") to search engines
  - Classifier: raw input -> url / bang / search intent
  - Orchestrator: live suggestions with debounce and stale-result discard
  - Search panel: keyboard selection and browser launch
"""

__version__ = "0.1.0-dev"
