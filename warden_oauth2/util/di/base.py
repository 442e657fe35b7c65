from dishka import Provider as DishkaProvider

from warden_oauth2.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for warden_oauth2 DI providers.

    Everything in this package is process-scoped, so providers default to
    the APP scope.
    """

    scope = Scope.APP
