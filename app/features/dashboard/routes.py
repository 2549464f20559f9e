"""API routes for the sales dashboard.

Every endpoint either answers with complete data or fails with 500; a failed
computation is never reported as zeros or an empty list.
"""

from fastapi import APIRouter, Depends

from app.core.exceptions import DatabaseError
from app.core.logging import get_logger
from app.features.catalog.deps import get_catalog_gateway
from app.features.catalog.gateway import CatalogGateway
from app.features.dashboard.schemas import DashboardMetrics, MonthlyRevenuePoint, TopProduct
from app.features.dashboard.service import DashboardService

logger = get_logger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/metricas",
    response_model=DashboardMetrics,
    summary="Headline sales metrics",
    description="""
Compute headline sales metrics over the whole purchase history.

- `totalProdutosVendidos`: number of purchases
- `faturamentoTotal`: revenue (see `DASHBOARD_REVENUE_SOURCE`)
- `ticketMedio`: revenue / purchases, 0 without purchases
- `taxaDeConversao`: purchases / `DASHBOARD_TOTAL_LEADS` * 100
- `formatados`: the same values rendered for display (`R$ 1234,56`, `0.20%`)
""",
)
async def get_metrics(
    gateway: CatalogGateway = Depends(get_catalog_gateway),
) -> DashboardMetrics:
    try:
        return await DashboardService(gateway).compute_metrics()
    except Exception as e:
        logger.error(
            "dashboard.metrics_failed",
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        raise DatabaseError(details={"error": str(e)}) from e


@router.get(
    "/cursosPorReceita",
    response_model=list[TopProduct],
    summary="Top products by revenue",
    description="""
Rank products by the sum of their frozen sale prices and return the top entries
(`DASHBOARD_TOP_PRODUCTS_LIMIT`, default 3). Fewer products means fewer
entries. A product that no longer exists is shown as `Produto Removido`.
""",
)
async def get_top_products(
    gateway: CatalogGateway = Depends(get_catalog_gateway),
) -> list[TopProduct]:
    try:
        return await DashboardService(gateway).top_products_by_revenue()
    except Exception as e:
        logger.error(
            "dashboard.top_products_failed",
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        raise DatabaseError(details={"error": str(e)}) from e


@router.get(
    "/graficoLinha",
    response_model=list[MonthlyRevenuePoint],
    summary="Monthly revenue chart",
    description="""
Revenue (`receita`) and number of sales (`vendas`) per calendar month,
oldest first. `mes` is a three-letter Portuguese month label without the year.
""",
)
async def get_monthly_chart(
    gateway: CatalogGateway = Depends(get_catalog_gateway),
) -> list[MonthlyRevenuePoint]:
    try:
        return await DashboardService(gateway).monthly_revenue_chart()
    except Exception as e:
        logger.error(
            "dashboard.monthly_chart_failed",
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        raise DatabaseError(
            message="Erro interno no servidor ao processar vendas.",
            details={"error": str(e)},
        ) from e
