"""Status and classification codes used by business records."""

from __future__ import annotations

from lehudata.enums.coded import CodedEnum


class MessageConsumerStatus(CodedEnum):
    """Consumption state of a message."""

    UNCONSUMED = (1, "未消费")
    CONSUMER_FAIL = (-1, "消费失败")
    CONSUMER_SUCCESS = (2, "消费成功")


class MessageSendStatus(CodedEnum):
    """Delivery state of a message."""

    UNSENT = (1, "未发送")
    SEND_FAIL = (-1, "发送失败")
    SEND_SUCCESS = (2, "发送成功")


class ReconciliationStatus(CodedEnum):
    """State of a reconciliation run."""

    NO = (1, "未对账")
    FAIL = (-1, "对账完成有问题")
    SUCCESS = (2, "对账完成没有问题")
    FINISH = (3, "对账有问题处理完毕")


class OrderStatus(CodedEnum):
    """Payment state of an order."""

    NO_PAY = (1, "未支付")
    CANCEL = (2, "已取消")
    PAY = (3, "已支付")
    REFUND = (4, "已退单")


class CategoryLevel(CodedEnum):
    """Level of a dimension category."""

    ONE = (1, "一级")
    TWO = (2, "二级")


class IdType(CodedEnum):
    """Kind of identity document."""

    IDENTITY = (1, "身份证")
    HKMTW_PERMIT = (2, "港澳台居民居住证")
    HKM_TRAVEL_PERMIT = (3, "港澳居民来往内地通行证")
    TW_TRAVEL_PERMIT = (4, "台湾居民来往内地通行证")
    PASSPORT = (5, "护照")
    FOREIGNER_RESIDENCE_PERMIT = (6, "外国人永久居住证")


class ReactorType(CodedEnum):
    """A viewer's reaction to a video."""

    NORMAL = (0, "无反应")
    LIKE = (1, "点赞")
    DISLIKE = (2, "点踩")


class TableType(CodedEnum):
    """Presentation kind of a query result."""

    TABLE = (1, "报表")
    CHART = (2, "图表")