"""Routing — two-field controller resolution.

``class`` and ``method`` request fields plus a body-derived verb select
a registered controller and one of its methods. Unknown controllers fall
back to the not-found controller.
"""
