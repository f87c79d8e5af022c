"""
Utils module for configexport core functionality.

This module contains configuration management, logging utilities and
atomic file writing helpers.
"""
