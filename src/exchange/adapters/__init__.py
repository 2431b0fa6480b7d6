"""
============================

Exchange REST Adapters.

============================

This package contains adapter implementations for cryptocurrency exchanges.
Adapters declare their endpoints, sign requests and translate exchange
payloads into the unified models.

"""
