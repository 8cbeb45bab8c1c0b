from lehudata.enums.records import (
    CategoryLevel,
    IdType,
    MessageConsumerStatus,
    MessageSendStatus,
    OrderStatus,
    ReactorType,
    ReconciliationStatus,
    TableType,
)


def test_from_code_round_trip():
    for number in (1, -1, 2):
        assert int(MessageConsumerStatus.from_code(number)) == number
        assert int(MessageSendStatus.from_code(number)) == number
    for number in (1, -1, 2, 3):
        assert int(ReconciliationStatus.from_code(number)) == number
    for number in (1, 2, 3, 4):
        assert int(OrderStatus.from_code(number)) == number
    for number in (1, 2):
        assert int(CategoryLevel.from_code(number)) == number
        assert int(TableType.from_code(number)) == number
    for number in (1, 2, 3, 4, 5, 6):
        assert int(IdType.from_code(number)) == number
    for number in (0, 1, 2):
        assert int(ReactorType.from_code(number)) == number


def test_every_member_has_message():
    assert MessageConsumerStatus.msg_of(1) == "未消费"
    assert MessageConsumerStatus.msg_of(2) == "消费成功"
    assert MessageSendStatus.msg_of(1) == "未发送"
    assert MessageSendStatus.msg_of(-1) == "发送失败"
    assert MessageSendStatus.msg_of(2) == "发送成功"
    assert ReconciliationStatus.msg_of(1) == "未对账"
    assert ReconciliationStatus.msg_of(-1) == "对账完成有问题"
    assert ReconciliationStatus.msg_of(2) == "对账完成没有问题"
    assert ReconciliationStatus.msg_of(3) == "对账有问题处理完毕"
    assert OrderStatus.msg_of(1) == "未支付"
    assert OrderStatus.msg_of(2) == "已取消"
    assert OrderStatus.msg_of(3) == "已支付"
    assert CategoryLevel.msg_of(1) == "一级"
    assert CategoryLevel.msg_of(2) == "二级"
    assert IdType.msg_of(1) == "身份证"
    assert IdType.msg_of(6) == "外国人永久居住证"
    assert ReactorType.msg_of(0) == "无反应"
    assert ReactorType.msg_of(1) == "点赞"
    assert ReactorType.msg_of(2) == "点踩"
    assert TableType.msg_of(1) == "报表"


def test_unknown_code_without_zero_member():
    assert MessageConsumerStatus.from_code(999) is None
    assert MessageConsumerStatus.msg_of(999) == ""
    assert MessageSendStatus.from_code(999) is None
    assert MessageSendStatus.msg_of(999) == ""
    assert ReconciliationStatus.from_code(999) is None
    assert ReconciliationStatus.msg_of(999) == ""


def test_reactor_unknown_falls_back_to_normal():
    assert ReactorType.from_code(999) is ReactorType.NORMAL
    assert ReactorType.msg_of(999) == "无反应"


def test_pinned_messages():
    assert MessageConsumerStatus.from_code(-1).msg() == "消费失败"
    assert OrderStatus.REFUND.msg() == "已退单"
    assert IdType.PASSPORT.msg() == "护照"
    assert TableType.CHART.msg() == "图表"


def test_negative_codes_are_distinct():
    assert MessageSendStatus.from_code(-1) is not MessageSendStatus.from_code(1)
    assert int(MessageSendStatus.from_code(-1)) == -1
    assert ReconciliationStatus.from_code(-1) is not ReconciliationStatus.from_code(1)


def test_members_compare_as_ints():
    assert ReactorType.LIKE == CategoryLevel.from_code(1)
    ordered = sorted(OrderStatus.from_code(number) for number in (4, 2, 3, 1))
    assert [int(member) for member in ordered] == [1, 2, 3, 4]
    assert ordered[-1] is OrderStatus.REFUND