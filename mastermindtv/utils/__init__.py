"""Utility helpers for Mastermind TV"""
