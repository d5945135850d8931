"""Routing — ordered route table with exact path and method matching.

Routes are registered during setup and frozen before the first
dispatch.
"""
