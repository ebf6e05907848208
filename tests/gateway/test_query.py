from __future__ import annotations

from src.hr_admin.hr_admin.gateway.query import AnyOf, Condition, Paging, Query, SortSpec


def test_query_lists_every_field_and_omits_empty_sections():
    params = Query.build(["Name", "email_c"]).to_params()

    assert params == {"fields": [{"field": {"Name": "Name"}}, {"field": {"Name": "email_c"}}]}


def test_equality_filters_go_to_where_and_or_groups_to_where_groups():
    query = Query.build(
        ["Name"],
        filters=[
            Condition.equal_to("status_c", "Pending"),
            AnyOf((Condition.contains("type_c", "sick"), Condition.contains("reason_c", "sick"))),
        ],
        sort=[SortSpec("request_date_c", descending=True)],
        paging=Paging(limit=50),
    )

    params = query.to_params()

    assert params["where"] == [{"FieldName": "status_c", "Operator": "EqualTo", "Values": ["Pending"]}]
    assert params["whereGroups"] == [
        {
            "operator": "OR",
            "subGroups": [
                {"conditions": [{"fieldName": "type_c", "operator": "Contains", "values": ["sick"]}], "operator": "OR"},
                {"conditions": [{"fieldName": "reason_c", "operator": "Contains", "values": ["sick"]}], "operator": "OR"},
            ],
        }
    ]
    assert params["orderBy"] == [{"fieldName": "request_date_c", "sorttype": "DESC"}]
    assert params["pagingInfo"] == {"limit": 50, "offset": 0}
