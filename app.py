# app.py
from flask import Flask, render_template, request, session, redirect, url_for, jsonify
import os
from dotenv import load_dotenv
from config import config
from cms import CrudService, CrudServiceError
from content import site_copy
from quiz import (QuizFlow, STATE_IN_PROGRESS, calculate_category_scores, find_result,
                  mindset_level, mindset_percent)

load_dotenv()

# --- Configuration / App factory ------------------------------------------------
def create_app(config_name=None):
    app = Flask(__name__)

    # Configuration
    env = config_name or os.environ.get('FLASK_ENV', 'default')
    app.config.from_object(config.get(env, config['default']))

    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    app.extensions['cms'] = CrudService.from_config(app.config)

    return app

app = create_app()


def get_crud_service():
    return app.extensions['cms']


# --- Session helpers -------------------------------------------------------------
def fetch_collection(name):
    """
    Fetch a CMS collection. Returns None when the data is unavailable;
    the failure is logged and not retried.
    """
    try:
        return get_crud_service().get_all(name)
    except CrudServiceError:
        app.logger.exception("Error loading %s", name)
        return None


def initialize_session():
    """Start a new quiz: fetch the questions once and drop any previous result"""
    records = fetch_collection(app.config['QUESTIONS_COLLECTION']) or []
    flow = QuizFlow.start(records)
    session.pop('quiz_result', None)
    save_flow(flow)
    app.logger.info("Quiz started with %d questions", flow.total)
    return flow


def load_flow():
    data = session.get('quiz')
    if data is None:
        return None
    return QuizFlow.from_dict(data)


def save_flow(flow):
    session['quiz'] = flow.to_dict()
    session.modified = True


# --- Routes ----------------------------------------------------------------------
@app.route('/')
def index():
    return render_template('index.html', copy=site_copy)


@app.route('/start', methods=['POST'])
def start_assessment():
    session.clear()
    initialize_session()
    return redirect(url_for('quiz'))


@app.route('/quiz', methods=['GET', 'POST'])
def quiz():
    flow = load_flow()
    # a finished quiz is started over instead of being shown again
    if flow is None or (request.method == 'GET' and flow.state != STATE_IN_PROGRESS):
        flow = initialize_session()

    if request.method == 'POST':
        answer = request.form.get('answer')
        if answer is not None:
            flow.select_answer(answer)

        action = request.form.get('action', 'next')
        completion = None
        if action == 'previous':
            flow.retreat()
        else:
            completion = flow.advance()
        save_flow(flow)

        if completion is not None:
            # transient hand-off to the results page, never put in the URL
            session['quiz_result'] = completion.to_handoff()
            session.modified = True
            app.logger.info("Quiz completed: category=%s mindset=%.2f",
                            completion.category, completion.mindset_score)
            return redirect(url_for('results'))
        return redirect(url_for('quiz'))

    if flow.state != STATE_IN_PROGRESS:
        return render_template('quiz.html', flow=flow, unavailable=True)

    return render_template('quiz.html',
                           flow=flow,
                           unavailable=False,
                           question=flow.current_question,
                           current_question=flow.position,
                           total_questions=flow.total)


# --- Answer staging --------------------------------------------------------------
@app.route('/select_answer', methods=['POST'])
def select_answer():
    flow = load_flow()
    if flow is None:
        return jsonify({'success': False, 'redirect': url_for('quiz')})

    data = request.get_json(silent=True) or {}
    if not flow.select_answer(data.get('value')):
        return jsonify({'success': False})

    save_flow(flow)
    return jsonify({'success': True, 'staged': flow.staged})


# --- Live Scores Endpoint --------------------------------------------------------
@app.route('/current_scores')
def current_scores():
    """Category totals for the answers recorded so far"""
    flow = load_flow()
    if flow is None:
        return jsonify({'category_scores': [], 'answered': 0, 'total': 0})

    category_scores = calculate_category_scores(flow.questions, flow.answers)
    return jsonify({
        'category_scores': [[category, score] for category, score in category_scores.items()],
        'answered': len(flow.answers),
        'total': flow.total,
    })


# --- Results ---------------------------------------------------------------------
@app.route('/results')
def results():
    handoff = session.get('quiz_result')
    if not handoff or not handoff.get('category'):
        return render_template('results.html', missing=True)

    category = handoff['category']
    result = None
    records = fetch_collection(app.config['RESULTS_COLLECTION'])
    if records is not None:
        result = find_result(records, category)
        if result is None:
            app.logger.warning("No result record for category %r", category)

    mindset_score = handoff.get('mindset_score') or 0
    return render_template('results.html',
                           missing=False,
                           category=category,
                           result=result or {},
                           mindset_level=mindset_level(mindset_score),
                           mindset_percent=mindset_percent(mindset_score),
                           next_steps=site_copy.NEXT_STEPS)


@app.route('/restart')
def restart():
    session.clear()
    return redirect(url_for('quiz'))


# --- Run (development only) ------------------------------------------------------
if __name__ == '__main__':
    if app.config.get('DEBUG', False):
        app.run(debug=True)
    else:
        port_env = os.getenv('port') or os.getenv('PORT') or "5000"
        try:
            port = int(port_env)
        except ValueError:
            port = 5000
        app.run(host='0.0.0.0', port=port)
