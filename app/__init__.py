"""Storefront activity service package.

Kept as a regular package so ``app`` resolves to this project rather than a
namespace package picked up from site-packages.
"""
