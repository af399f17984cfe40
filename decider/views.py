from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.http import require_POST
from django.views.decorators.csrf import csrf_exempt
import json
from .dfa_validation import check_dfa_structure
from .dfa_enumeration import enumerate_dfas, enumeration_size
from .dfa_emptiness import recognizes_empty_language, reachable_states
from .tm_conversion import convert_dfa_to_tm, tm_to_dict
from .tm_simulation import simulate_tm, MAX_STEPS


@csrf_exempt
@require_POST
def validate_dfa(request):
    """
    Django view to check the structure of a DFA.

    Expects a POST request with a JSON body containing:
    - dfa: The DFA definition

    Returns a JSON response with 'valid' and, for an invalid DFA, 'error'.
    An invalid DFA is a normal result here, not a failed request.
    """
    try:
        data = json.loads(request.body)
        dfa = data.get('dfa')

        if not dfa:
            return JsonResponse({'error': 'Missing DFA definition'}, status=400)

        return JsonResponse(check_dfa_structure(dfa))

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def enumerate_dfas_view(request):
    """
    Django view to list two-state DFAs over an alphabet.

    Expects a POST request with a JSON body containing:
    - alphabet: List of symbols
    - max_states: Optional, ignored beyond the fixed two states
    - count: Number of DFAs wanted (defaults to 20)
    """
    try:
        data = json.loads(request.body)
        alphabet = data.get('alphabet')

        if not isinstance(alphabet, list) or not all(isinstance(s, str) for s in alphabet):
            return JsonResponse({'error': 'alphabet must be a list of strings'}, status=400)

        if len(set(alphabet)) != len(alphabet):
            return JsonResponse({'error': 'alphabet must not contain duplicates'}, status=400)

        try:
            count = int(data.get('count', 20))
            max_states = int(data.get('max_states', 2))
        except (ValueError, TypeError):
            return JsonResponse({'error': 'count and max_states must be integers'}, status=400)

        dfas = enumerate_dfas(alphabet, max_states, count)

        return JsonResponse({
            'dfas': dfas,
            'count': len(dfas),
            'total': enumeration_size(alphabet)
        })

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def convert_dfa_to_tm_view(request):
    """
    Django view to build the decider Turing machine for a DFA.

    Expects a POST request with a JSON body containing:
    - dfa: The DFA definition

    Returns a JSON response with the machine under 'tm'.
    """
    try:
        data = json.loads(request.body)
        dfa = data.get('dfa')

        if not dfa:
            return JsonResponse({'error': 'Missing DFA definition'}, status=400)

        tm = convert_dfa_to_tm(dfa)

        return JsonResponse({'tm': tm_to_dict(tm)})

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def simulate_tm_view(request):
    """
    Django view to compile a DFA to a Turing machine and run it.

    Expects a POST request with a JSON body containing:
    - dfa: The DFA definition
    - input: The input string to simulate

    Returns a JSON response with the verdict and every tape configuration.
    """
    try:
        data = json.loads(request.body)
        dfa = data.get('dfa')
        input_string = data.get('input', '')

        if not dfa:
            return JsonResponse({'error': 'Missing DFA definition'}, status=400)

        if not isinstance(input_string, str):
            return JsonResponse({'error': 'input must be a string'}, status=400)

        tm = convert_dfa_to_tm(dfa)
        max_steps = getattr(settings, 'DECIDER_MAX_STEPS', MAX_STEPS)
        result = simulate_tm(tm, input_string, max_steps)

        return JsonResponse(result.to_dict())

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def check_empty_language(request):
    """
    Django view to check whether a DFA recognises the empty language.

    Expects a POST request with a JSON body containing:
    - dfa: The DFA definition
    """
    try:
        data = json.loads(request.body)
        dfa = data.get('dfa')

        if not dfa:
            return JsonResponse({'error': 'Missing DFA definition'}, status=400)

        return JsonResponse({
            'empty': recognizes_empty_language(dfa),
            'reachable_states': reachable_states(dfa)
        })

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)
