"""Timesheet Sync package.

Feature modules (worklogs, periods, boards, teams, reconcile) keep the
business rules in plain services; HTTP clients sit behind repository
Protocols so the rules can be tested with in-memory fakes.
"""
