"""
SHIPENGINE Systems

Propulsion configuration registry and engine system calculator.
"""
