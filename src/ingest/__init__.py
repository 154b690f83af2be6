"""SUA feed ingestion.

This package fetches the SUA export over HTTP and parses its table.
It yields normalized records for the output driver.
"""
