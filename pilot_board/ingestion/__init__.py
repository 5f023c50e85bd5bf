"""
Data ingestion module for PilotBoard.

Fetches the IVAO whazzup snapshot and parses pilot reports.
"""

from pilot_board.ingestion.whazzup_client import WhazzupClient, PilotReport, FetchResult

__all__ = ['WhazzupClient', 'PilotReport', 'FetchResult']
