from django.urls import path
from . import views

urlpatterns = [
    # Structural check of a DFA
    path('api/validate-dfa/', views.validate_dfa, name='validate_dfa'),

    # Two-state DFA enumeration
    path('api/enumerate-dfas/', views.enumerate_dfas_view, name='enumerate_dfas'),

    # DFA to decider TM conversion and simulation
    path('api/convert-dfa-to-tm/', views.convert_dfa_to_tm_view, name='convert_dfa_to_tm'),
    path('api/simulate-tm/', views.simulate_tm_view, name='simulate_tm'),

    # Emptiness check
    path('api/check-empty-language/', views.check_empty_language, name='check_empty_language'),
]
