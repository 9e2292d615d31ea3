import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Type, TypeVar

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError
from pydantic import BaseModel

from expense_tracker.core.exceptions import StorageError, TransactionNotFound
from expense_tracker.db.store import TransactionStore
from expense_tracker.models.transaction import (
    ExpenseCreate,
    ExpenseInDB,
    ExpenseUpdate,
    IncomeCreate,
    IncomeInDB,
    IncomeUpdate,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class DynamoTransactionStore(TransactionStore):
    """
    DynamoDB-backed store. Both tables use ``user_id`` as partition key and
    ``id`` as sort key.
    """

    backend = "dynamo"

    def __init__(
        self,
        region: str,
        incomes_table: str,
        expenses_table: str,
        dynamodb: Optional[Any] = None,
    ) -> None:
        dynamodb = dynamodb or boto3.resource("dynamodb", region_name=region)
        self.incomes_table = dynamodb.Table(incomes_table)
        self.expenses_table = dynamodb.Table(expenses_table)

    # Incomes

    def add_income(self, user_id: str, income: IncomeCreate) -> IncomeInDB:
        record = IncomeInDB(user_id=user_id, **income.model_dump())
        self._put(self.incomes_table, record, "put_income")
        return record

    def update_income(self, user_id: str, income_id: str, income: IncomeUpdate) -> IncomeInDB:
        return self._update(self.incomes_table, IncomeInDB, "Income", user_id, income_id, income)

    def delete_income(self, user_id: str, income_id: str) -> None:
        self._delete(self.incomes_table, "Income", user_id, income_id)

    def list_incomes(self, user_id: str) -> List[IncomeInDB]:
        return self._query(self.incomes_table, IncomeInDB, user_id)

    # Expenses

    def add_expense(self, user_id: str, expense: ExpenseCreate) -> ExpenseInDB:
        record = ExpenseInDB(user_id=user_id, **expense.model_dump())
        self._put(self.expenses_table, record, "put_expense")
        return record

    def update_expense(self, user_id: str, expense_id: str, expense: ExpenseUpdate) -> ExpenseInDB:
        return self._update(self.expenses_table, ExpenseInDB, "Expense", user_id, expense_id, expense)

    def delete_expense(self, user_id: str, expense_id: str) -> None:
        self._delete(self.expenses_table, "Expense", user_id, expense_id)

    def list_expenses(self, user_id: str) -> List[ExpenseInDB]:
        return self._query(self.expenses_table, ExpenseInDB, user_id)

    # Table helpers

    def _put(self, table, record: BaseModel, operation: str) -> None:
        try:
            table.put_item(Item=_convert_for_dynamo(record.model_dump(mode="json")))
        except ClientError as e:
            logger.error(f"{operation} failed: {e.response['Error']['Message']}")
            raise StorageError(f"{operation} failed") from e
        logger.info(f"{operation} stored {record.id} for user {record.user_id}")

    def _update(
        self,
        table,
        model: Type[RecordT],
        kind: str,
        user_id: str,
        record_id: str,
        changes: BaseModel,
    ) -> RecordT:
        """
        Replace the mutable fields of an existing item. Returns the updated record.
        """
        update_expression_parts = []
        expression_attribute_values = {}
        expression_attribute_names = {"#id": "id"}

        for idx, (key, value) in enumerate(changes.model_dump(mode="json").items()):
            placeholder = f"#f{idx}"
            value_placeholder = f":v{idx}"
            update_expression_parts.append(f"{placeholder} = {value_placeholder}")
            expression_attribute_names[placeholder] = key
            expression_attribute_values[value_placeholder] = value

        try:
            response = table.update_item(
                Key={"user_id": user_id, "id": record_id},
                UpdateExpression="SET " + ", ".join(update_expression_parts),
                ConditionExpression="attribute_exists(#id)",
                ExpressionAttributeNames=expression_attribute_names,
                ExpressionAttributeValues=_convert_for_dynamo(expression_attribute_values),
                ReturnValues="ALL_NEW",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                logger.warning(f"{kind} {record_id} not found for user {user_id}")
                raise TransactionNotFound(kind, record_id) from e
            logger.error(f"update {kind.lower()} failed: {e.response['Error']['Message']}")
            raise StorageError(f"update {kind.lower()} failed") from e

        return model.model_validate(response["Attributes"])

    def _delete(self, table, kind: str, user_id: str, record_id: str) -> None:
        try:
            response = table.delete_item(
                Key={"user_id": user_id, "id": record_id},
                ReturnValues="ALL_OLD",
            )
        except ClientError as e:
            logger.error(f"delete {kind.lower()} failed: {e.response['Error']['Message']}")
            raise StorageError(f"delete {kind.lower()} failed") from e

        if "Attributes" not in response:
            logger.warning(f"{kind} {record_id} not found for user {user_id}")
            raise TransactionNotFound(kind, record_id)

    def _query(self, table, model: Type[RecordT], user_id: str) -> List[RecordT]:
        items: List[Dict[str, Any]] = []
        kwargs: Dict[str, Any] = {"KeyConditionExpression": Key("user_id").eq(user_id)}
        try:
            while True:
                response = table.query(**kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        except ClientError as e:
            logger.error(f"query for user {user_id} failed: {e.response['Error']['Message']}")
            raise StorageError("query failed") from e

        return [model.model_validate(item) for item in items]


def _convert_for_dynamo(obj: Any):
    """
    Recursively convert floats to Decimal for DynamoDB compatibility.
    """
    if isinstance(obj, float):
        return Decimal(str(obj))
    if isinstance(obj, dict):
        return {k: _convert_for_dynamo(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_convert_for_dynamo(v) for v in obj]
    return obj
