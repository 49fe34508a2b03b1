"""Top-level package for the route planner.

A directed, weighted graph of stations and typed connections that can
be edited interactively, queried for minimum-cost routes and saved
back to CSV files.
"""
