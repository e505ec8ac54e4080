"""
Service layer abstraction.

Services hold the data and the operations on it, independent of the
HTTP layer, so handlers stay thin and the store can be tested alone.
"""
