"""Generic repository over a Flask-SQLAlchemy model.

Each repository is constructed with the session it writes through, so the
caller decides which session (request-scoped, test, CLI) is used. Every
write commits immediately; there is no unit-of-work spanning calls.
"""
import logging

from sqlalchemy import inspect as sa_inspect

logger = logging.getLogger(__name__)


class Repository:
    """Create / read / update / delete / count over a single model."""

    model = None  # Set by subclasses

    def __init__(self, session):
        if self.model is None:
            raise TypeError(f'{type(self).__name__} does not declare a model')
        self.session = session

    def create(self, entity):
        """Persist a new entity and return it with its assigned identity."""
        self.session.add(entity)
        self.session.commit()
        logger.debug('Created %r', entity)
        return entity

    # Adding an already persistent entity is a no-op, so save() doubles as
    # "write pending changes" for loaded objects.
    save = create

    def find_by_id(self, entity_id):
        return self.session.get(self.model, entity_id)

    def find_all(self):
        return self.session.query(self.model).order_by(self.model.id).all()

    def update(self, entity, **changes):
        """Apply changes to mapped columns or relationships of entity and commit them."""
        unknown = set(changes) - set(sa_inspect(self.model).attrs.keys())
        if unknown:
            raise AttributeError(f'{self.model.__name__} has no field(s) {", ".join(sorted(unknown))}')
        for field, value in changes.items():
            setattr(entity, field, value)
        self.session.commit()
        logger.debug('Updated %r (%s)', entity, ', '.join(changes))
        return entity

    def delete(self, entity):
        self.session.delete(entity)
        self.session.commit()
        logger.debug('Deleted %r', entity)

    def delete_by_id(self, entity_id):
        entity = self.find_by_id(entity_id)
        if entity is None:
            return False
        self.delete(entity)
        return True

    def count(self):
        return self.session.query(self.model).count()
