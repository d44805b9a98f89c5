"""
Repositório relacional (fonte de verdade) de Tamanhos.
"""
import logging

from loja.database import db
from loja.models import Tamanhos
from loja.utils.pagination import DESC, Page, PageRequest

logger = logging.getLogger(__name__)


class TamanhosRepository:
    """Acesso ao banco via Flask-SQLAlchemy"""

    model = Tamanhos
    sortable_fields = ('id', 'name')

    def save(self, entity):
        """
        Insere ou substitui a entidade e retorna a instância persistida.

        Sem id, ou com um id que não existe no banco, a linha é inserida e o
        banco atribui o id (a sequence nunca fica atrás de ids explícitos).
        Com id existente a linha é substituída.
        """
        if entity.id is not None and db.session.get(self.model, entity.id) is None:
            logger.debug("Tamanhos id=%s não existe; inserindo com id gerado", entity.id)
            entity.id = None

        if entity.id is None:
            db.session.add(entity)
        else:
            entity = db.session.merge(entity)
        db.session.commit()
        logger.debug("Tamanhos salvo: id=%s", entity.id)
        return entity

    def find_all(self, page_request: PageRequest) -> Page:
        query = self.model.query

        order_by = []
        for prop, direction in page_request.sort:
            if prop not in self.sortable_fields:
                continue
            column = getattr(self.model, prop)
            order_by.append(column.desc() if direction == DESC else column.asc())
        # Ordem estável entre páginas
        order_by.append(self.model.id.asc())
        query = query.order_by(*order_by)

        pagination = query.paginate(
            page=page_request.page + 1,
            per_page=page_request.size,
            error_out=False,
        )
        return Page(content=list(pagination.items), total_elements=pagination.total or 0,
                    page_request=page_request)

    def find_one(self, entity_id):
        return db.session.get(self.model, entity_id)

    def delete(self, entity_id):
        """Remove pelo id; id inexistente não é erro."""
        deleted = self.model.query.filter_by(id=entity_id).delete()
        db.session.commit()
        logger.debug("Tamanhos removido: id=%s (linhas=%s)", entity_id, deleted)
