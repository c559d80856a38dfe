"""
This module contains the Dockerfile model.

- instructions.py: the instruction formatting rules and the plain instruction sequence
- step.py: named and described instruction blocks
- dockerfile.py: complete Dockerfiles with the generated file header
- loader.py: create Dockerfiles from YAML build descriptions
"""
