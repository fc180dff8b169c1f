from protoc_gen_example.naming import camel_case, local_type_name


class TestCamelCase:
    def test_snake_case(self):
        assert camel_case("user_id") == "UserId"
        assert camel_case("customer_name") == "CustomerName"

    def test_single_word(self):
        assert camel_case("name") == "Name"

    def test_empty(self):
        assert camel_case("") == ""

    def test_leading_trailing_and_doubled_underscores(self):
        assert camel_case("__a_b__") == "AB"
        assert camel_case("order__id") == "OrderId"
        assert camel_case("_") == ""

    def test_rest_of_segment_is_kept(self):
        # Only the first letter of a segment changes case.
        assert camel_case("userID") == "UserID"
        assert camel_case("http_URL") == "HttpURL"

    def test_digits(self):
        assert camel_case("field_1") == "Field1"
        assert camel_case("v2_api") == "V2Api"


class TestLocalTypeName:
    def test_fully_qualified(self):
        assert local_type_name(".pkg.Outer.Inner") == "Inner"

    def test_no_dot(self):
        assert local_type_name("Inner") == "Inner"

    def test_empty(self):
        assert local_type_name("") == ""

    def test_trailing_dot(self):
        assert local_type_name(".pkg.") == ""
