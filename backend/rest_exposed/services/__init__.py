"""Exposure services: option stores, preference loading, hooks and the resolver.

Modules
- options / firestore: key/value option stores
- preferences: stored toggles -> PreferenceSet
- hooks: priority-ordered actions and filters
- exposure: applies a PreferenceSet to the content type registry
"""
