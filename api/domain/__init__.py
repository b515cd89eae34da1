# SPDX-License-Identifier: Apache-2.0

"""
Domain logic package for the Crisis Check-in platform.

This package contains the disaster and volunteer assignment rules. They
depend only on the data store interface, so they are testable against the
in-memory store.
"""
