from rest_framework.views import APIView

from account.permissions import IsAdmin, ReadOnlyOrManager, ReadOnlyOrAdmin
from bets.pagination import PageQuerySerializer, paginate
from bets.responses import success_response, created_response, paginated_response
from .models import Client
from .serializers import (
    ClientSerializer,
    ProjectSerializer,
    ManagerContactSerializer,
    ManagerContactUpdateSerializer,
    ProductSerializer,
)
from .utils.reference_manager import ReferenceManager


class ManagerWriteAdminDeleteMixin:
    """
    조회: 로그인 사용자, 생성/수정: 매니저 이상, 삭제: 관리자
    """
    def get_permissions(self):
        if self.request.method == 'DELETE':
            return [IsAdmin()]
        return [ReadOnlyOrManager()]


def _page_params(request):
    query = PageQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    return query.validated_data['page'], query.validated_data['limit']


# ----------------------------------------------------------------------
# 1. 고객사 목록 / 생성
# ----------------------------------------------------------------------
class ClientListCreateView(ManagerWriteAdminDeleteMixin, APIView):

    def get(self, request):
        page, limit = _page_params(request)
        queryset = (
            Client.objects
            .filter(is_deleted=False)
            .prefetch_related('projects')
            .order_by('client_id')
        )
        total, rows = paginate(queryset, page, limit)
        return paginated_response(
            ClientSerializer(rows, many=True).data, total, page, limit, '고객사 목록 조회 성공'
        )

    def post(self, request):
        serializer = ClientSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        client = serializer.save()
        return created_response(ClientSerializer(client).data, '고객사 생성 완료')


# ----------------------------------------------------------------------
# 2. 고객사 상세 / 수정 / 삭제
# ----------------------------------------------------------------------
class ClientDetailView(ManagerWriteAdminDeleteMixin, APIView):

    def get(self, request, client_id):
        client = ReferenceManager.get_client(client_id)
        return success_response(ClientSerializer(client).data, '고객사 조회 성공')

    def put(self, request, client_id):
        client = ReferenceManager.get_client(client_id)
        serializer = ClientSerializer(client, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        client = serializer.save()
        return success_response(ClientSerializer(client).data, '고객사 수정 완료')

    def delete(self, request, client_id):
        ReferenceManager.delete_client(client_id, actor=request.user)
        return success_response(None, '고객사 삭제 완료')


# ----------------------------------------------------------------------
# 3. 프로젝트 목록 / 생성
# ----------------------------------------------------------------------
class ProjectListCreateView(ManagerWriteAdminDeleteMixin, APIView):

    def get(self, request):
        page, limit = _page_params(request)
        queryset = ReferenceManager.project_queryset().order_by('project_id')

        client_id = request.query_params.get('client_id')
        if client_id:
            queryset = queryset.filter(client_id=client_id)
        dept_id = request.query_params.get('dept_id')
        if dept_id:
            queryset = queryset.filter(department_id=dept_id)

        total, rows = paginate(queryset, page, limit)
        return paginated_response(
            ProjectSerializer(rows, many=True).data, total, page, limit, '프로젝트 목록 조회 성공'
        )

    def post(self, request):
        serializer = ProjectSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        project = serializer.save()
        return created_response(ProjectSerializer(project).data, '프로젝트 생성 완료')


# ----------------------------------------------------------------------
# 4. 프로젝트 상세 / 수정 / 삭제
# ----------------------------------------------------------------------
class ProjectDetailView(ManagerWriteAdminDeleteMixin, APIView):

    def get(self, request, project_id):
        project = ReferenceManager.get_project(project_id)
        return success_response(ProjectSerializer(project).data, '프로젝트 조회 성공')

    def put(self, request, project_id):
        project = ReferenceManager.get_project(project_id)
        serializer = ProjectSerializer(project, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        project = serializer.save()
        return success_response(ProjectSerializer(project).data, '프로젝트 수정 완료')

    def delete(self, request, project_id):
        ReferenceManager.delete_project(project_id, actor=request.user)
        return success_response(None, '프로젝트 삭제 완료')


# ----------------------------------------------------------------------
# 5. 고객사 담당자
# ----------------------------------------------------------------------
class ProjectContactListView(ManagerWriteAdminDeleteMixin, APIView):

    def get(self, request, project_id):
        contacts = ReferenceManager.contacts_of(project_id)
        return success_response(
            ManagerContactSerializer(contacts, many=True).data, '담당자 목록 조회 성공'
        )


class ContactCreateView(ManagerWriteAdminDeleteMixin, APIView):

    def post(self, request):
        serializer = ManagerContactSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contact = serializer.save()
        return created_response(ManagerContactSerializer(contact).data, '담당자 생성 완료')


class ContactDetailView(ManagerWriteAdminDeleteMixin, APIView):

    def put(self, request, contact_id):
        contact = ReferenceManager.get_contact(contact_id)
        serializer = ManagerContactUpdateSerializer(contact, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        contact = serializer.save()
        return success_response(ManagerContactSerializer(contact).data, '담당자 수정 완료')

    def delete(self, request, contact_id):
        ReferenceManager.delete_contact(contact_id)
        return success_response(None, '담당자 삭제 완료')


# ----------------------------------------------------------------------
# 6. 제품 (조회: 로그인 사용자, 변경: 관리자)
# ----------------------------------------------------------------------
class ProductListCreateView(APIView):
    permission_classes = [ReadOnlyOrAdmin]

    def get(self, request):
        products, _ = ReferenceManager.grouped_products()
        return success_response(ProductSerializer(products, many=True).data, '제품 목록 조회 성공')

    def post(self, request):
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()
        return created_response(ProductSerializer(product).data, '제품 생성 완료')


class ProductGroupedView(APIView):
    permission_classes = [ReadOnlyOrAdmin]

    def get(self, request):
        products, grouped = ReferenceManager.grouped_products()
        return success_response(
            {
                'products': ProductSerializer(products, many=True).data,
                'grouped': {
                    product_type: ProductSerializer(items, many=True).data
                    for product_type, items in grouped.items()
                },
            },
            '제품 그룹 조회 성공'
        )


class ProductDetailView(APIView):
    permission_classes = [ReadOnlyOrAdmin]

    def get(self, request, product_id):
        product = ReferenceManager.get_product(product_id)
        return success_response(ProductSerializer(product).data, '제품 조회 성공')

    def put(self, request, product_id):
        product = ReferenceManager.get_product(product_id)
        serializer = ProductSerializer(product, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()
        return success_response(ProductSerializer(product).data, '제품 수정 완료')

    def delete(self, request, product_id):
        product = ReferenceManager.get_product(product_id)
        product.delete()
        return success_response(None, '제품 삭제 완료')
