from django.shortcuts import redirect


def index(request):
    # The directory listing doubles as the home page
    return redirect("organisations:index")
