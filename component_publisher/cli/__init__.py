"""Command-line interface for component-publisher"""
