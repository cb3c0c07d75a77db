# app/db/models/transaction.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey, func, Enum as SQLAlchemyEnum
from sqlalchemy.orm import relationship
from app.db.base_class import Base

class TransactionType(str, enum.Enum): # str subclass so Pydantic/FastAPI treat it as a plain string
    income = "income"
    expense = "expense"

class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # Categories live in the static catalog (app/services/catalog.py), not in a table
    category_id = Column(Integer, nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    type = Column(SQLAlchemyEnum(TransactionType, name="transaction_type_enum", create_constraint=True), nullable=False)
    date = Column(Date, nullable=False, index=True) # Date of the money movement, set by the user
    description = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="transactions")
