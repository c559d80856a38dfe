"""
This module contains the build part of fluentdocker (usable from the command line with `fluentdocker build`).

- builder.py: write the rendered Dockerfile and run docker on it
"""
