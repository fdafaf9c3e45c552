from django.urls import path
from .views import (
    WorkLogListCreateView, WorkLogDetailView, WorkLogStatusView,
    WorkStatisticsView, WorkDetailedStatisticsView,
)


# api/work/
urlpatterns = [
    path('', WorkLogListCreateView.as_view(), name='worklog-list'),
    # 통계 (매니저/관리자)
    path('statistics/', WorkStatisticsView.as_view(), name='worklog-statistics'),
    path('statistics/detailed/', WorkDetailedStatisticsView.as_view(), name='worklog-statistics-detailed'),

    path('<int:log_id>/', WorkLogDetailView.as_view(), name='worklog-detail'),
    path('<int:log_id>/status/', WorkLogStatusView.as_view(), name='worklog-status'),
]
