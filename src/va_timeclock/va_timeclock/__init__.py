"""VA Timeclock package.

Client-side core of the VA workforce app: the daily clock-in/clock-out
lifecycle, derived hours/status and the queries dashboards need. Persistence
and authentication belong to the REST backend, reached through gateway
protocols with an httpx implementation.
"""
