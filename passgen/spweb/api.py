from flask import Flask, jsonify, request
from passgen.generator import GenerationRequest, generate
from passgen.errors import PassgenError

app = Flask(__name__)

# JSON field -> GenerationRequest field
FIELDS = {
    'length': 'length',
    'upper': 'include_uppercase',
    'lower': 'include_lowercase',
    'digits': 'include_digits',
    'symbols': 'include_symbols',
}

def _bad_request(message, error_type='BadRequest'):
    return jsonify({'error': message, 'type': error_type}), 400

@app.route('/')
def home():
    return jsonify({
        "message": "passgen API is running"
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _bad_request('expected a JSON object')
    missing = [k for k in FIELDS if k not in data]
    if missing:
        return _bad_request('missing fields: ' + ', '.join(missing))
    length = data['length']
    if isinstance(length, bool) or not isinstance(length, int):
        return _bad_request('length must be an integer')
    for k in ('upper', 'lower', 'digits', 'symbols'):
        if not isinstance(data[k], bool):
            return _bad_request(f'{k} must be a boolean')

    req = GenerationRequest(**{FIELDS[k]: data[k] for k in FIELDS})
    try:
        password = generate(req)
    except PassgenError as e:
        return _bad_request(str(e), type(e).__name__)
    return jsonify({'password': password})

if __name__ == "__main__":
    app.run(debug=True)
