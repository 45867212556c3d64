"""
Service layer abstraction.

Services encapsulate the booking rules.  They depend only on a
``RecordStore``, so the JSON file used today can be replaced by
another backend without changing API handlers.
"""
