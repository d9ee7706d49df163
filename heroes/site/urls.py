from django.urls import path

from . import views

app_name = "heroessite"

urlpatterns = [
    path("", views.home, name="home"),
    path("about/", views.about, name="about"),
    path("programs/", views.program_index, name="program_index"),
    path("programs/<slug:slug>/", views.program_detail, name="program_detail"),
    path("blog/", views.blog_index, name="blog_index"),
    path("blog/<slug:slug>/", views.blog_detail, name="blog_detail"),
    path("board/", views.board, name="board"),
    path("team/", views.team, name="team"),
    path("impact/", views.impact, name="impact"),
    path("donate/", views.donate, name="donate"),
    path("volunteer/", views.volunteer, name="volunteer"),
    path("contact/", views.contact, name="contact"),
]
