import pytest

from quantity.domain.models import TokenInfo


def test_token_normalizes_ticker_to_uppercase():
    token = TokenInfo(process_id="Sa0iBLPNyJQrwpTTG", denomination=3, ticker="trunk")

    assert token.ticker == "TRUNK"
    assert str(token) == "TRUNK"


def test_token_str_falls_back_to_process_id():
    assert str(TokenInfo(process_id="Sa0iBLPNyJQrwpTTG", denomination=12)) == (
        "Sa0iBLPNyJQrwpTTG"
    )


def test_token_invalid_empty_process_id():
    with pytest.raises(ValueError):
        TokenInfo(process_id="", denomination=3)


@pytest.mark.parametrize("denomination", [-1, 1.5, True])
def test_token_invalid_denomination(denomination):
    with pytest.raises(ValueError):
        TokenInfo(process_id="token", denomination=denomination)


def test_token_is_hashable_value_object():
    a = TokenInfo(process_id="token", denomination=3, ticker="abc")
    b = TokenInfo(process_id="token", denomination=3, ticker="ABC")

    assert a == b
    assert len({a, b}) == 1
