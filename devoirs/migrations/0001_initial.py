from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Devoir',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date_creation', models.DateTimeField(auto_now_add=True)),
                ('date_modification', models.DateTimeField(auto_now=True)),
                ('categorie', models.CharField(db_index=True, max_length=80)),
                ('titre', models.CharField(max_length=200)),
                ('contenu', models.TextField()),
                ('url_pdf', models.CharField(blank=True, max_length=500, null=True)),
                ('semestre', models.PositiveSmallIntegerField(choices=[(1, 'Semestre 1'), (2, 'Semestre 2')])),
            ],
            options={
                'verbose_name': 'Devoir',
                'verbose_name_plural': 'Devoirs',
                'ordering': ['-date_creation', '-id'],
                'abstract': False,
                'indexes': [models.Index(fields=['categorie', 'semestre'], name='devoir_categorie_semestre_idx')],
            },
        ),
    ]
