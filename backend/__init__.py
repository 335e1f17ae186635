"""
backend – RightsCard API service package.

Entry point:  backend.main:app  (FastAPI ASGI application)

Sub-packages:
    ai          Chat-completion client, prompts, card generation and parsing
    capture     Audio/video capture session state machine
    db          Persisted client state (selections, preferences, recordings)
    services    Optional remote collaborators (IPFS, Supabase, geocoding)
    utils       Formatting helpers
"""
