import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('project', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='WorkLog',
            fields=[
                ('log_id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='작업 로그 식별자')),
                ('work_start', models.DateTimeField(verbose_name='작업시작일시')),
                ('work_end', models.DateTimeField(verbose_name='작업종료일시')),
                ('work_type', models.CharField(max_length=50, verbose_name='작업 유형')),
                ('supprt_type', models.CharField(max_length=50, verbose_name='지원 구분')),
                ('service_type', models.CharField(max_length=50, verbose_name='서비스 유형')),
                ('product_type', models.CharField(max_length=50, verbose_name='제품명')),
                ('product_version', models.CharField(max_length=50, verbose_name='제품 버전')),
                ('status', models.CharField(choices=[('등록', '등록'), ('관리자확인', '관리자확인'), ('승인완료', '승인완료')], default='등록', max_length=10, verbose_name='결재 상태')),
                ('details', models.TextField(verbose_name='상세 작업 내용')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='등록일시')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='수정일시')),
                ('contact', models.ForeignKey(db_column='contact_id', on_delete=django.db.models.deletion.PROTECT, related_name='work_logs', to='project.managercontact', verbose_name='요청자')),
                ('project', models.ForeignKey(db_column='project_id', on_delete=django.db.models.deletion.PROTECT, related_name='work_logs', to='project.project', verbose_name='프로젝트')),
                ('user', models.ForeignKey(db_column='user_id', on_delete=django.db.models.deletion.PROTECT, related_name='work_logs', to=settings.AUTH_USER_MODEL, verbose_name='담당 직원')),
            ],
            options={
                'verbose_name': '작업 로그',
                'verbose_name_plural': '작업 로그',
                'db_table': 'work_log',
                'ordering': ['-work_start'],
                'indexes': [
                    models.Index(fields=['work_start'], name='idx_work_log_start'),
                    models.Index(fields=['status'], name='idx_work_log_status'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Incident',
            fields=[
                ('incident_id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='장애 고유 식별자')),
                ('action_type', models.CharField(choices=[('임시', '임시'), ('영구', '영구'), ('가이드', '가이드'), ('모니터링', '모니터링')], max_length=50, verbose_name='조치 유형')),
                ('start_time', models.DateTimeField(verbose_name='장애발생일시')),
                ('end_time', models.DateTimeField(verbose_name='장애복구일시')),
                ('severity', models.CharField(choices=[('Critical', 'Critical'), ('Major', 'Major'), ('Minor', 'Minor')], max_length=20, verbose_name='영향도')),
                ('cause_type', models.CharField(max_length=20, verbose_name='장애 원인 분류')),
                ('is_recurrence', models.CharField(choices=[('Y', '재발'), ('N', '최초')], default='N', max_length=1, verbose_name='재발 여부')),
                ('log', models.OneToOneField(db_column='log_id', on_delete=django.db.models.deletion.CASCADE, related_name='+', to='work.worklog', verbose_name='연관 작업 로그')),
            ],
            options={
                'verbose_name': '장애 상세',
                'verbose_name_plural': '장애 상세',
                'db_table': 'incidents',
            },
        ),
        migrations.AddField(
            model_name='worklog',
            name='incident',
            field=models.OneToOneField(blank=True, db_column='incident_id', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='work.incident', verbose_name='연관 장애'),
        ),
        migrations.CreateModel(
            name='FileUpload',
            fields=[
                ('file_id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='파일 식별자')),
                ('original_name', models.CharField(max_length=255, verbose_name='원본 파일명')),
                ('stored_name', models.CharField(blank=True, max_length=255, null=True, verbose_name='저장된 파일명')),
                ('file_path', models.CharField(blank=True, max_length=500, null=True, verbose_name='파일 저장 경로')),
                ('file_size', models.PositiveIntegerField(blank=True, null=True, verbose_name='파일 크기(bytes)')),
                ('log', models.ForeignKey(db_column='log_id', on_delete=django.db.models.deletion.CASCADE, related_name='files', to='work.worklog', verbose_name='작업 로그')),
                ('user', models.ForeignKey(db_column='user', on_delete=django.db.models.deletion.PROTECT, related_name='uploaded_files', to=settings.AUTH_USER_MODEL, verbose_name='업로드한 사용자')),
            ],
            options={
                'verbose_name': '첨부 파일',
                'verbose_name_plural': '첨부 파일',
                'db_table': 'file_uploads',
                'ordering': ['file_id'],
            },
        ),
    ]
