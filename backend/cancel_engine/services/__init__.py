"""Cancellation Engine - Services"""
