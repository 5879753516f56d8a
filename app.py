"""Flask web application for the Matchmaker agent."""

import logging
import os
import uuid

from flask import Flask, jsonify, request

from config import AGENT_ID, AGENT_NAME, CLIENTS, LOG_LEVEL, PORT
from matchmaker.logging_config import setup_logging
from matchmaker.plugin import matchmaker_plugin
from matchmaker.runtime import AgentRuntime, Content, Memory
from matchmaker.services.cache_service import create_cache_manager
from matchmaker.services.store import MatchmakerStore

logger = logging.getLogger("matchmaker.app")

app = Flask(__name__)

# Agent runtimes by agent id
runtimes = {}


def create_runtime():
    """Build the default runtime from configuration."""
    return AgentRuntime(
        AGENT_NAME,
        create_cache_manager(),
        agent_id=AGENT_ID,
        plugins=[matchmaker_plugin],
        clients=CLIENTS,
    )


def register_runtime(runtime):
    runtimes[runtime.agent_id] = runtime
    return runtime


def get_runtime(agent_id):
    if agent_id not in runtimes and agent_id == AGENT_ID:
        register_runtime(create_runtime())
    return runtimes.get(agent_id)


@app.route('/health')
def health():
    """Liveness check."""
    return jsonify({'status': 'ok', 'agents': list(runtimes)})


@app.route('/<agent_id>/message', methods=['POST'])
def api_message(agent_id):
    """Process one chat message and return the agent's replies."""
    runtime = get_runtime(agent_id)
    if runtime is None:
        return jsonify({'error': f'Unknown agent: {agent_id}'}), 404

    data = request.get_json(silent=True) or {}
    text = (data.get('text') or '').strip()
    user_id = data.get('userId')
    if not text:
        return jsonify({'error': 'text is required'}), 400
    if not user_id:
        return jsonify({'error': 'userId is required'}), 400

    username = data.get('userName') or data.get('username') or user_id
    room_id = data.get('roomId') or str(uuid.uuid4())

    try:
        runtime.database_adapter.ensure_account(user_id, username, data.get('name'))
        runtime.database_adapter.add_participant(room_id, user_id)
        runtime.database_adapter.add_participant(room_id, runtime.agent_id)

        message = Memory(
            user_id=user_id,
            room_id=room_id,
            content=Content(text=text, source=data.get('source')),
        )
        responses = runtime.process_message(message)
        return jsonify([content.to_dict() for content in responses])
    except Exception as e:
        logger.error("Message processing failed for %s", user_id, exc_info=True)
        return jsonify({'error': str(e)}), 500


@app.route('/<agent_id>/users/<user_id>/profile')
def api_user_profile(agent_id, user_id):
    """Stored intention and profiles for a user."""
    runtime = get_runtime(agent_id)
    if runtime is None:
        return jsonify({'error': f'Unknown agent: {agent_id}'}), 404

    store = MatchmakerStore(runtime.cache_manager, runtime.character_name)
    intention = store.load_intention(user_id)
    profile = store.load_profile(user_id)
    professional = store.load_professional(user_id)
    interests = store.load_interest_record(user_id) or {}
    return jsonify({
        'userId': user_id,
        'matchIntention': intention.to_dict() if intention else None,
        'profile': profile.to_dict() if profile else None,
        'professionalProfile': professional.to_dict() if professional else None,
        'interestGraph': interests.get('graph'),
        'interestGraphUal': interests.get('ual'),
    })


@app.route('/<agent_id>/users/<user_id>/matches')
def api_user_matches(agent_id, user_id):
    """Match history for a user."""
    runtime = get_runtime(agent_id)
    if runtime is None:
        return jsonify({'error': f'Unknown agent: {agent_id}'}), 404

    store = MatchmakerStore(runtime.cache_manager, runtime.character_name)
    return jsonify(store.load_match_history(user_id).to_dict())


if __name__ == '__main__':
    setup_logging(LOG_LEVEL)
    if not os.environ.get('GEMINI_API_KEY') and not os.environ.get('GOOGLE_API_KEY') \
            and not os.environ.get('OPENAI_API_KEY'):
        logger.warning("No LLM API key set (GEMINI_API_KEY, GOOGLE_API_KEY or OPENAI_API_KEY)")

    app.run(debug=False, host='0.0.0.0', port=PORT)
