"""Read-side access to compositor state.

Managers take a ``CompositorGateway`` as a parameter and raise domain
exceptions (``LookupError`` subclasses), never click exceptions -- that
translation is the CLI's responsibility.
"""
