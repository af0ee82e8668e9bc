# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    Version definition.
"""


def _get_dist(distribution_name: str) -> str:
    # pylint: disable=import-outside-toplevel
    from importlib.metadata import version, PackageNotFoundError  # noqa: WPS433

    try:
        return version(distribution_name)
    except PackageNotFoundError:    # pragma: no cover
        # Running from a source checkout without an install
        return '0.0.0'


__version__ = _get_dist('dshp')


__all__ = ('__version__',)
