from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from expense_tracker.core.exceptions import StorageError, TransactionNotFound
from expense_tracker.db.dynamo import DynamoTransactionStore
from expense_tracker.models.transaction import ExpenseCategory, ExpenseCreate, IncomeCreate, IncomeUpdate

stored_income = {
    "id": "inc-1",
    "user_id": "user-1",
    "amount": Decimal("500"),
    "source": "Salary",
    "date": "2024-01-05",
    "created_at": "2024-01-05T09:30:00+00:00",
}


def client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


@pytest.fixture
def tables():
    return {"incomes": MagicMock(), "expenses": MagicMock()}


@pytest.fixture
def dynamo_store(tables):
    resource = MagicMock()
    resource.Table.side_effect = lambda name: tables[name]
    return DynamoTransactionStore("eu-west-1", "incomes", "expenses", dynamodb=resource)


def test_add_expense_converts_amount_to_decimal(dynamo_store, tables):
    expense = dynamo_store.add_expense(
        "user-1",
        ExpenseCreate(amount=Decimal("12.75"), category=ExpenseCategory.FOOD, description="Lunch", date=date(2024, 1, 2)),
    )
    item = tables["expenses"].put_item.call_args.kwargs["Item"]
    assert item["amount"] == Decimal("12.75")
    assert item["category"] == "food"
    assert item["date"] == "2024-01-02"
    assert item["user_id"] == "user-1"
    assert item["id"] == expense.id
    tables["incomes"].put_item.assert_not_called()


def test_list_incomes_follows_pagination(dynamo_store, tables):
    second = dict(stored_income, id="inc-2", amount=Decimal("20.5"))
    tables["incomes"].query.side_effect = [
        {"Items": [stored_income], "LastEvaluatedKey": {"user_id": "user-1", "id": "inc-1"}},
        {"Items": [second]},
    ]
    incomes = dynamo_store.list_incomes("user-1")
    assert [income.id for income in incomes] == ["inc-1", "inc-2"]
    assert incomes[1].amount == Decimal("20.5")
    assert incomes[0].date == date(2024, 1, 5)
    assert tables["incomes"].query.call_args.kwargs["ExclusiveStartKey"] == {"user_id": "user-1", "id": "inc-1"}


def test_update_income_returns_new_attributes(dynamo_store, tables):
    tables["incomes"].update_item.return_value = {
        "Attributes": dict(stored_income, amount=Decimal("650"), source="Bonus")
    }
    updated = dynamo_store.update_income(
        "user-1", "inc-1", IncomeUpdate(amount=Decimal("650"), source="Bonus", date=date(2024, 1, 5))
    )
    assert updated.amount == Decimal("650")
    assert updated.source == "Bonus"
    kwargs = tables["incomes"].update_item.call_args.kwargs
    assert kwargs["Key"] == {"user_id": "user-1", "id": "inc-1"}
    assert kwargs["ConditionExpression"] == "attribute_exists(#id)"
    assert set(kwargs["ExpressionAttributeNames"].values()) == {"id", "amount", "source", "date"}


def test_update_unknown_income_raises_not_found(dynamo_store, tables):
    tables["incomes"].update_item.side_effect = client_error("ConditionalCheckFailedException", "UpdateItem")
    with pytest.raises(TransactionNotFound):
        dynamo_store.update_income(
            "user-1", "missing", IncomeUpdate(amount=Decimal("1"), source="x", date=date(2024, 1, 1))
        )


def test_delete_without_old_attributes_raises_not_found(dynamo_store, tables):
    tables["expenses"].delete_item.return_value = {}
    with pytest.raises(TransactionNotFound):
        dynamo_store.delete_expense("user-1", "missing")


def test_client_errors_become_storage_errors(dynamo_store, tables):
    tables["incomes"].put_item.side_effect = client_error("ProvisionedThroughputExceededException", "PutItem")
    with pytest.raises(StorageError):
        dynamo_store.add_income("user-1", IncomeCreate(amount=Decimal("5"), source="Gift", date=date(2024, 1, 1)))
