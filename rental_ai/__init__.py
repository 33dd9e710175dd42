"""
/**
 * @file rental_ai/__init__.py
 * @description AI helpers for the student rental platform: chat translation and listing description enhancement.
 */
"""
