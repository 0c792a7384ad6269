"""
Browser flows for the devices application.

This package contains the Playwright page objects for the devices list
and the add-device form, and the scenarios that cross-check them against
the devices API.
"""
