"""
covid_tracker

Terminal reporting client for the disease.sh COVID-19 API:
global summary, per-territory list, live diff stream and timelines.
"""

__version__ = "0.2.0"
