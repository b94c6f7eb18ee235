"""FitTrack backend: app factory, settings, auth tokens and navigation."""
