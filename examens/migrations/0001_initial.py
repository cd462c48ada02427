from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Examen',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date_creation', models.DateTimeField(auto_now_add=True)),
                ('date_modification', models.DateTimeField(auto_now=True)),
                ('categorie', models.CharField(db_index=True, max_length=80)),
                ('titre', models.CharField(max_length=200)),
                ('url_pdf', models.CharField(max_length=500)),
                ('contenu', models.TextField()),
                ('url_solution', models.CharField(blank=True, max_length=500, null=True)),
                ('annee', models.PositiveIntegerField()),
            ],
            options={
                'verbose_name': 'Examen',
                'verbose_name_plural': 'Examens',
                'ordering': ['-date_creation', '-id'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='ExamenBlanc',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date_creation', models.DateTimeField(auto_now_add=True)),
                ('date_modification', models.DateTimeField(auto_now=True)),
                ('categorie', models.CharField(db_index=True, max_length=80)),
                ('titre', models.CharField(max_length=200)),
                ('url_pdf', models.CharField(max_length=500)),
                ('contenu', models.TextField()),
                ('url_solution', models.CharField(blank=True, max_length=500, null=True)),
            ],
            options={
                'verbose_name': 'Examen blanc',
                'verbose_name_plural': 'Examens blancs',
                'ordering': ['-date_creation', '-id'],
                'abstract': False,
            },
        ),
    ]
