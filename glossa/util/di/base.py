from dishka import Provider as DishkaProvider

from glossa.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for Glossa DI providers.

    Factories without an explicit scope live for one unit of work.
    """

    scope = Scope.UOW
