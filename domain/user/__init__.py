"""User domain module.

This domain manages user identity: reconciling identity-provider sign-ins
(Sign in with Apple and similar) with durable user records.
"""
