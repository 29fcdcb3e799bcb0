"""Application layer: commands and queries dispatched through the mediator"""
