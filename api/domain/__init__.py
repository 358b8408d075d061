# SPDX-License-Identifier: Apache-2.0

"""
Domain logic package for the pet blood-donor program.

This package contains pure decision functions with no side effects.
All domain functions are pure and testable without external dependencies.
"""
