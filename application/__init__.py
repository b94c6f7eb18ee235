"""
Application Layer for the FitTrack API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- authorization.py: identity resolution and ownership/visibility checks
- use_cases/: account, profile, workout and log operations
- exceptions.py: persistence failure type shared with infrastructure
"""
