"""
Product Model
"""

from datetime import datetime, timezone
from shopfront.extensions import db


def _utcnow():
    return datetime.now(timezone.utc)


class Product(db.Model):
    """Product offered in the store"""
    __tablename__ = 'products'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    sku = db.Column(db.String(100), unique=True, nullable=True, index=True)
    description = db.Column(db.Text)
    price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    stock = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)
    created_at = db.Column(db.DateTime, default=_utcnow)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)
    
    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'sku': self.sku,
            'description': self.description,
            'price': str(self.price) if self.price is not None else None,
            'stock': self.stock,
            'is_active': self.is_active,
        }
    
    def __repr__(self):
        return f'<Product {self.title}>'
