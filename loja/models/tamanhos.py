from loja.database import db

# Intervalo da coluna BIGINT
ID_MIN = -2 ** 63
ID_MAX = 2 ** 63 - 1


class Tamanhos(db.Model):
    __tablename__ = 'tamanhos'

    NAME_MAX_LENGTH = 50

    id = db.Column(db.BigInteger().with_variant(db.Integer, 'sqlite'), primary_key=True, autoincrement=True)
    name = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)

    @staticmethod
    def is_valid_id(value):
        """True se o id cabe na coluna BIGINT"""
        return ID_MIN <= value <= ID_MAX

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
        }

    def __repr__(self):
        return f"Tamanhos{{id={self.id}, name='{self.name}'}}"
