"""Raisin Tracker package.

Organized by feature modules (employees, daily_work, reports) with a thin
Flask controller layer over service/repository layers.
"""
