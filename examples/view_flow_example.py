"""
Simple working example of flowinject: two views of one flow sharing state.
"""

from flowinject import (
    ApplicationScoped,
    FlowScoped,
    Inject,
    PostConstruct,
    ViewContext,
    ViewFlowContext,
    ViewScoped,
)
from flowinject.config.logger import get_logger

logger = get_logger("example")


@ApplicationScoped
class OrderRepository:
    def __init__(self):
        self.orders = ["#1001", "#1002"]


@FlowScoped
class Selection:
    def __init__(self):
        self.order = None


@ViewScoped
class OrderListModel:
    @Inject
    def __init__(self, repository: OrderRepository, selection: Selection):
        self.repository = repository
        self.selection = selection

    def select(self, index: int):
        self.selection.order = self.repository.orders[index]


@ViewScoped
class OrderDetailModel:
    selection: Selection = Inject()

    @PostConstruct
    def init(self):
        logger.info("Detail view opened", order=self.selection.order)


def main():
    flow = ViewFlowContext()
    list_view = ViewContext(flow_context=flow)
    detail_view = ViewContext(flow_context=flow)

    list_view.resolve(OrderListModel).select(1)
    detail = detail_view.resolve(OrderDetailModel)

    assert detail.selection is list_view.resolve(Selection)
    logger.info("Selected order", order=detail.selection.order)


if __name__ == "__main__":
    main()
