"""Shared application plumbing"""
