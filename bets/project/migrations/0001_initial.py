import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('account', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Client',
            fields=[
                ('client_id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='고객사 고유 식별자')),
                ('client_name', models.CharField(max_length=100, verbose_name='고객사 명칭')),
                ('is_deleted', models.BooleanField(default=False, verbose_name='삭제 여부')),
            ],
            options={
                'verbose_name': '고객사',
                'verbose_name_plural': '고객사',
                'db_table': 'client',
                'ordering': ['client_id'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('product_id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='제품 식별자')),
                ('product_type', models.CharField(max_length=50, verbose_name='제품 유형')),
                ('product_name', models.CharField(max_length=100, verbose_name='제품명')),
            ],
            options={
                'verbose_name': '제품',
                'verbose_name_plural': '제품',
                'db_table': 'products',
                'ordering': ['product_type', 'product_name'],
                'constraints': [models.UniqueConstraint(fields=('product_type', 'product_name'), name='uniq_product_type_name')],
            },
        ),
        migrations.CreateModel(
            name='Project',
            fields=[
                ('project_id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='프로젝트 고유 식별자')),
                ('project_name', models.CharField(max_length=100, verbose_name='프로젝트 명칭')),
                ('contract_period', models.CharField(max_length=100, verbose_name='계약 기간')),
                ('is_deleted', models.BooleanField(default=False, verbose_name='삭제 여부')),
                ('client', models.ForeignKey(db_column='client_id', on_delete=django.db.models.deletion.PROTECT, related_name='projects', to='project.client', verbose_name='고객사')),
                ('department', models.ForeignKey(db_column='dept_id', on_delete=django.db.models.deletion.PROTECT, related_name='projects', to='account.department', verbose_name='담당 부서')),
            ],
            options={
                'verbose_name': '프로젝트',
                'verbose_name_plural': '프로젝트',
                'db_table': 'projects',
                'ordering': ['project_id'],
            },
        ),
        migrations.CreateModel(
            name='ManagerContact',
            fields=[
                ('contact_id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='고객사 담당자 고유 식별자')),
                ('name', models.CharField(max_length=50, verbose_name='요청자 성명')),
                ('email', models.EmailField(max_length=100, verbose_name='요청자 이메일')),
                ('phone', models.CharField(max_length=20, verbose_name='요청자 연락처')),
                ('project', models.ForeignKey(db_column='project_id', on_delete=django.db.models.deletion.PROTECT, related_name='contacts', to='project.project', verbose_name='소속 프로젝트')),
            ],
            options={
                'verbose_name': '고객사 담당자',
                'verbose_name_plural': '고객사 담당자',
                'db_table': 'manager_contacts',
                'ordering': ['contact_id'],
            },
        ),
    ]
