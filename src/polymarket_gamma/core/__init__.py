"""Shared configuration and structural protocols."""
